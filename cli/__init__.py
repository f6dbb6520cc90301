"""Command-line interface for css-bench."""
