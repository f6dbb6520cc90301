from __future__ import annotations

import argparse
from pathlib import Path

from pipeline.frameworks import FRAMEWORK_NAMES


def add_base_args(parser: argparse.ArgumentParser) -> None:
    """Register the inputs and the execution knobs.

    This includes:
    - the config directory and source stylesheet (positional)
    - output directory and build command
    - framework selection
    - timeout / concurrency limits
    """

    parser.add_argument("config_dir", type=Path, help="Directory of build configuration files")
    parser.add_argument("css_path", type=Path, help="Source stylesheet passed to every build")

    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Where artifacts are written; cleared at the start of every run (default: ./output)",
    )
    parser.add_argument(
        "--build-command",
        default=None,
        help=(
            "Build command template with {css}, {config} and {output} placeholders "
            "(default: 'npx tailwind build {css} -c {config} -o {output}')"
        ),
    )

    # Pre-built frameworks
    parser.add_argument(
        "--node-modules",
        type=Path,
        default=None,
        help="node_modules directory holding the pre-built frameworks (default: search upwards from cwd)",
    )
    parser.add_argument(
        "--frameworks",
        default=None,
        help=f"Comma-separated frameworks to include (default: {','.join(FRAMEWORK_NAMES)})",
    )
    parser.add_argument("--skip-frameworks", action="store_true", help="Only benchmark the build configs")

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Kill a build after this many seconds (default: 0 = wait forever)",
    )
    parser.add_argument(
        "--max-concurrency",
        type=int,
        default=None,
        help="Maximum number of configs built at once (default: 0 = all at once)",
    )
