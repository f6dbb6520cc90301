#!/usr/bin/env python3
"""
CLI for the CSS build benchmark.

Builds every configuration in CONFIG_DIR against one source stylesheet,
minifies and compresses each result, does the same for a set of popular
pre-built CSS frameworks, and prints a size comparison table.

Usage:
  python css_bench_cli.py configs/ src/styles.css
  python css_bench_cli.py configs/ src/styles.css --skip-frameworks --json output/report.json
  python css_bench_cli.py configs/ src/styles.css --build-command "npx tailwindcss -i {css} -c {config} -o {output}"
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from cli.args.base import add_base_args
from cli.args.output import add_output_args
from cli.common import apply_overrides, parse_csv, verbosity_from_args
from pipeline.config import settings_from_env
from pipeline.frameworks import select_frameworks
from pipeline.wiring import build_pipeline, configure_logging, load_env
from tools.builder import parse_build_command


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="css-bench",
        description="Compare build, minified, gzip and brotli sizes of CSS build configs and CSS frameworks.",
    )
    add_base_args(parser)
    add_output_args(parser)
    args = parser.parse_args(argv)

    if args.timeout is not None and args.timeout < 0:
        parser.error("--timeout must be >= 0")
    if args.max_concurrency is not None and args.max_concurrency < 0:
        parser.error("--max-concurrency must be >= 0")

    args.frameworks = parse_csv(args.frameworks) or None
    if args.frameworks:
        try:
            select_frameworks(args.frameworks)
        except ValueError as e:
            parser.error(str(e))

    if args.build_command is not None:
        try:
            parse_build_command(args.build_command)
        except ValueError as e:
            parser.error(f"--build-command: {e}")

    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(verbosity_from_args(args))

    # Always load .env so terminal runs behave like IDE/CI runs.
    load_env()
    try:
        settings = apply_overrides(settings_from_env(), args)
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")

    pipeline = build_pipeline(settings)
    try:
        pipeline.run(args.config_dir, args.css_path, json_path=args.json_path, csv_path=args.csv_path)
    except (FileNotFoundError, NotADirectoryError, ValueError) as e:
        raise SystemExit(str(e))


if __name__ == "__main__":
    main()
