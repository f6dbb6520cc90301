"""Measurement pipeline: build, minify, compress, measure and report."""
