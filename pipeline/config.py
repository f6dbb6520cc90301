"""pipeline.config

Run settings and how they are read from the environment.

Environment variables (all optional, CLI flags win):

- ``CSS_BENCH_OUTPUT_DIR``       output directory (default ``./output``)
- ``CSS_BENCH_BUILD_COMMAND``    build argv template, shell-quoted
- ``CSS_BENCH_NODE_MODULES``     node_modules directory holding the frameworks
- ``CSS_BENCH_TIMEOUT``          per-build timeout in seconds (0 = none)
- ``CSS_BENCH_MAX_CONCURRENCY``  max concurrent build items (0 = unbounded)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from tools.builder import DEFAULT_BUILD_COMMAND, parse_build_command


@dataclass(frozen=True)
class BenchSettings:
    """Knobs for one benchmark run."""

    output_dir: Path = Path("output")
    build_command: Tuple[str, ...] = DEFAULT_BUILD_COMMAND
    node_modules: Optional[Path] = None
    # None = every registered framework.
    frameworks: Optional[Tuple[str, ...]] = None
    skip_frameworks: bool = False
    timeout_seconds: float = 0
    max_concurrency: int = 0


def _env_number(env: Mapping[str, str], key: str, cast, default):
    raw = (env.get(key) or "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{key} must be >= 0, got {raw!r}")
    return value


def settings_from_env(env: Optional[Mapping[str, str]] = None) -> BenchSettings:
    """Build :class:`BenchSettings` from environment variables."""

    env = os.environ if env is None else env

    output_dir = env.get("CSS_BENCH_OUTPUT_DIR") or "output"
    raw_cmd = env.get("CSS_BENCH_BUILD_COMMAND") or None
    node_modules = env.get("CSS_BENCH_NODE_MODULES") or None

    return BenchSettings(
        output_dir=Path(output_dir),
        build_command=tuple(parse_build_command(raw_cmd)),
        node_modules=Path(node_modules) if node_modules else None,
        timeout_seconds=_env_number(env, "CSS_BENCH_TIMEOUT", float, 0),
        max_concurrency=_env_number(env, "CSS_BENCH_MAX_CONCURRENCY", int, 0),
    )
