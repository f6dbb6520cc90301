"""pipeline.wiring

This module is the **composition root** for the Python runtime.

"Composition root" means: the single place where we *assemble* the running
application from its building blocks:

- load configuration / environment variables (``.env`` via python-dotenv)
- configure logging
- build the high-level pipeline facade object

Keeping this wiring in one place prevents configuration and logging setup from
being duplicated across entrypoints (CLI, scripts, CI).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pipeline.config import BenchSettings, settings_from_env
from pipeline.pipeline import CssBenchmarkPipeline

ROOT_DIR = Path(__file__).resolve().parents[1]
ENV_PATH: Path = ROOT_DIR / ".env"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def load_env(dotenv_path: Path = ENV_PATH) -> None:
    """Load ``.env`` from the project root, then from the working directory.

    Variables already present in the environment are never overridden.
    """

    for candidate in (dotenv_path, Path.cwd() / ".env"):
        if candidate.is_file():
            load_dotenv(candidate, override=False)


def configure_logging(verbosity: int = 0) -> None:
    """-1 = warnings only, 0 = progress (INFO), 1+ = debug (commands)."""

    if verbosity < 0:
        level = logging.WARNING
    elif verbosity == 0:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def build_pipeline(settings: Optional[BenchSettings] = None, *, use_dotenv: bool = True) -> CssBenchmarkPipeline:
    """Build the high-level pipeline facade.

    When *settings* is omitted they come from the environment (after loading
    ``.env`` unless *use_dotenv* is false).
    """

    if settings is None:
        if use_dotenv:
            load_env(ENV_PATH)
        settings = settings_from_env()

    return CssBenchmarkPipeline(settings)
