"""Wrappers around the external build tool, the CSS minifier and the compressors."""
