"""pipeline.runner

The measurement pipeline.

* :func:`compare_builds` - build -> minify -> compress -> measure, per config file
* :func:`compare_frameworks` - copy pre-built framework css -> compress -> measure
* :func:`run_benchmark` - reset the output directory, run both phases
  concurrently, concatenate the results

Every item runs inside its own guard: an exception is logged and becomes a
failed :class:`~pipeline.models.ItemResult`; the other items carry on.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

from css_benchmark.io import OutputPaths, clear_output_dir, split_extension
from pipeline.config import BenchSettings
from pipeline.css_stats import CssStatsStrategy
from pipeline.frameworks import FrameworkSpec, resolve_package_file, select_frameworks
from pipeline.measure import get_file_sizes, measure
from pipeline.models import BenchmarkReport, ItemResult, StatsRecord
from tools.builder import build
from tools.compressor import compress
from tools.minifier import minify

logger = logging.getLogger(__name__)

KIND_BUILD = "build"
KIND_FRAMEWORK = "framework"


async def _guarded(label: str, kind: str, work: Callable[[], Awaitable[StatsRecord]]) -> ItemResult:
    try:
        record = await work()
    except Exception as e:
        logger.error("%s %r failed: %s", kind, label, e, exc_info=True)
        return ItemResult.failure(label, kind, e)
    logger.debug("%s %r done", kind, label)
    return ItemResult.success(label, kind, record)


def check_output_dir(output_dir: Path, config_dir: Path, css_path: Path) -> None:
    """Refuse an output directory that is, or contains, one of the inputs.

    The output directory is emptied at the start of a run, so this would delete
    the stylesheet or the configs before anything is built.
    """
    out = Path(output_dir).resolve()
    inputs = (
        ("config directory", Path(config_dir).resolve()),
        ("stylesheet", Path(css_path).resolve().parent),
    )
    for label, inp in inputs:
        if inp == out or out in inp.parents:
            raise ValueError(f"Output directory {out} contains the {label} ({inp}); choose another --output-dir")


def list_configs(config_dir: Path) -> List[Path]:
    """Regular files in *config_dir*, sorted by name."""
    return sorted((p for p in Path(config_dir).iterdir() if p.is_file()), key=lambda p: p.name)


async def benchmark_config(
    config_path: Path,
    css_path: Path,
    settings: BenchSettings,
    *,
    strategy: Optional[CssStatsStrategy] = None,
) -> StatsRecord:
    """Run one configuration through the whole pipeline, strictly in order."""
    name, _ext = split_extension(config_path.name)
    paths = OutputPaths.for_item(settings.output_dir, name)

    await build(
        config_path,
        paths.css,
        css_path,
        command=settings.build_command,
        timeout_seconds=settings.timeout_seconds,
    )
    await minify(paths.output_dir, paths.css.name)
    await compress(paths.minified)
    sizes, stats = await measure(paths.output_dir, name, strategy=strategy)
    return StatsRecord.build(name, sizes, stats)


async def compare_builds(
    config_dir: Path,
    css_path: Path,
    settings: BenchSettings,
    *,
    strategy: Optional[CssStatsStrategy] = None,
) -> List[ItemResult]:
    """Benchmark every file in *config_dir*; results follow the listing order."""
    configs = list_configs(config_dir)
    logger.debug("found %d config(s) in %s", len(configs), config_dir)

    limit = asyncio.Semaphore(settings.max_concurrency) if settings.max_concurrency > 0 else None

    async def one(config_path: Path) -> ItemResult:
        name, _ext = split_extension(config_path.name)

        async def work() -> StatsRecord:
            if limit is None:
                return await benchmark_config(config_path, Path(css_path), settings, strategy=strategy)
            async with limit:
                return await benchmark_config(config_path, Path(css_path), settings, strategy=strategy)

        return await _guarded(name, KIND_BUILD, work)

    return list(await asyncio.gather(*(one(c) for c in configs)))


async def load_framework(fw: FrameworkSpec, settings: BenchSettings) -> StatsRecord:
    """Copy a pre-built framework into the output directory and measure sizes."""
    paths = OutputPaths.for_item(settings.output_dir, fw.name)
    css_src = resolve_package_file(fw.css, node_modules=settings.node_modules)
    min_src = resolve_package_file(fw.minified, node_modules=settings.node_modules)

    await asyncio.gather(
        asyncio.to_thread(shutil.copyfile, css_src, paths.css),
        asyncio.to_thread(shutil.copyfile, min_src, paths.minified),
    )
    await compress(paths.minified)
    sizes = await get_file_sizes(paths.output_dir, fw.name)
    return StatsRecord.build(fw.name, sizes)


async def compare_frameworks(settings: BenchSettings) -> List[ItemResult]:
    """Benchmark the selected pre-built frameworks; results follow registry order."""
    if settings.skip_frameworks:
        return []
    selected = select_frameworks(settings.frameworks)

    async def one(fw: FrameworkSpec) -> ItemResult:
        return await _guarded(fw.name, KIND_FRAMEWORK, lambda: load_framework(fw, settings))

    return list(await asyncio.gather(*(one(fw) for fw in selected)))


async def run_benchmark(
    config_dir: Path,
    css_path: Path,
    settings: BenchSettings,
    *,
    strategy: Optional[CssStatsStrategy] = None,
) -> BenchmarkReport:
    """Reset the output directory and run both phases concurrently.

    Build results come first in the report, then framework results, whatever
    order the phases finish in.
    """
    css = Path(css_path)
    if not css.is_file():
        raise FileNotFoundError(f"Source stylesheet not found: {css}")
    if not Path(config_dir).is_dir():
        raise NotADirectoryError(f"Config directory not found: {config_dir}")

    check_output_dir(settings.output_dir, Path(config_dir), css)
    clear_output_dir(settings.output_dir)

    logger.info("Calculating...")
    build_results, framework_results = await asyncio.gather(
        compare_builds(Path(config_dir), css.resolve(), settings, strategy=strategy),
        compare_frameworks(settings),
    )
    logger.info("Finished.")

    return BenchmarkReport(results=[*build_results, *framework_results])
