"""pipeline.measure

Size and structure measurements for one benchmarked item.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Tuple

from css_benchmark.io import OutputPaths
from pipeline.css_stats import DEFAULT_STRATEGY, CssStatsStrategy
from pipeline.models import CssStats, FileSizes


def _sizes(paths: OutputPaths) -> FileSizes:
    # stat() raises FileNotFoundError for a missing artifact; that fails the item.
    original, minified, gzipped, brotlified = (p.stat().st_size for p in paths.size_files())
    return FileSizes.from_bytes(original, minified, gzipped, brotlified)


async def get_file_sizes(output_dir: Path, name: str) -> FileSizes:
    return await asyncio.to_thread(_sizes, OutputPaths.for_item(output_dir, name))


async def get_css_stats(path: Path, strategy: Optional[CssStatsStrategy] = None) -> CssStats:
    css = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    return (strategy or DEFAULT_STRATEGY).count(css)


async def measure(
    output_dir: Path,
    name: str,
    *,
    strategy: Optional[CssStatsStrategy] = None,
) -> Tuple[FileSizes, CssStats]:
    """Sizes of the four artifacts plus structural counts of the minified CSS."""
    sizes = await get_file_sizes(output_dir, name)
    stats = await get_css_stats(OutputPaths.for_item(output_dir, name).minified, strategy)
    return sizes, stats
