from __future__ import annotations

import argparse
from pathlib import Path


def add_output_args(parser: argparse.ArgumentParser) -> None:
    """Register report exports and log verbosity."""

    parser.add_argument("--json", dest="json_path", type=Path, default=None, help="Also write the results as JSON")
    parser.add_argument("--csv", dest="csv_path", type=Path, default=None, help="Also write the table as CSV")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log build commands and per-item progress")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
