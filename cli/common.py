from __future__ import annotations

"""cli.common

Small shared helpers for the CLI.
"""

import argparse
from dataclasses import replace
from typing import Any, Dict, Optional

from pipeline.config import BenchSettings
from tools.builder import parse_build_command


def parse_csv(raw: Optional[str]) -> list[str]:
    """Parse a comma-separated list value into a list of non-empty strings."""
    if not raw:
        return []
    return [x.strip() for x in raw.split(",") if x.strip()]


def verbosity_from_args(args: argparse.Namespace) -> int:
    if args.quiet:
        return -1
    return 1 if args.verbose else 0


def apply_overrides(settings: BenchSettings, args: argparse.Namespace) -> BenchSettings:
    """Return *settings* with every flag the user actually passed applied."""
    changes: Dict[str, Any] = {}
    if args.output_dir is not None:
        changes["output_dir"] = args.output_dir
    if args.build_command is not None:
        changes["build_command"] = tuple(parse_build_command(args.build_command))
    if args.node_modules is not None:
        changes["node_modules"] = args.node_modules
    if args.frameworks:
        changes["frameworks"] = tuple(args.frameworks)
    if args.skip_frameworks:
        changes["skip_frameworks"] = True
    if args.timeout is not None:
        changes["timeout_seconds"] = args.timeout
    if args.max_concurrency is not None:
        changes["max_concurrency"] = args.max_concurrency
    return replace(settings, **changes)
