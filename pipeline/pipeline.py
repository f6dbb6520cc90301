"""pipeline.pipeline

This module defines a *single, high-level* object that represents this repo's
primary capability: benchmark a directory of build configs plus the pre-built
frameworks, and report the results.

Why this exists
---------------
The behavior is spread across :mod:`pipeline.runner` (async measurement),
:mod:`pipeline.report` (table and exports) and :mod:`pipeline.config`
(settings). Callers (CLI, scripts, CI) should not have to wire the event loop,
the reporter and the exports themselves every time.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

from pipeline.config import BenchSettings
from pipeline.css_stats import CssStatsStrategy
from pipeline.models import BenchmarkReport
from pipeline.report import display, format_failures, write_report_csv, write_report_json
from pipeline.runner import run_benchmark

logger = logging.getLogger(__name__)


class CssBenchmarkPipeline:
    """High-level facade over the pipeline.

    Callers should prefer using this object (built via
    :func:`pipeline.wiring.build_pipeline`) rather than importing low-level
    modules directly.
    """

    def __init__(
        self,
        settings: BenchSettings,
        *,
        strategy: Optional[CssStatsStrategy] = None,
        console: Optional[Console] = None,
    ) -> None:
        self.settings = settings
        self._strategy = strategy
        self._console = console

    def measure(self, config_dir: Path, css_path: Path) -> BenchmarkReport:
        """Run the benchmark without printing anything."""
        return asyncio.run(run_benchmark(config_dir, css_path, self.settings, strategy=self._strategy))

    def run(
        self,
        config_dir: Path,
        css_path: Path,
        *,
        json_path: Optional[Path] = None,
        csv_path: Optional[Path] = None,
    ) -> BenchmarkReport:
        """Run the benchmark, print the table and write any requested exports."""
        report = self.measure(config_dir, css_path)

        display(report.records, self._console)

        if json_path is not None:
            write_report_json(json_path, report)
            logger.info("Wrote %s", json_path)
        if csv_path is not None:
            write_report_csv(csv_path, report.records)
            logger.info("Wrote %s", csv_path)

        for line in format_failures(report):
            logger.warning("Skipped %s", line)
        return report
