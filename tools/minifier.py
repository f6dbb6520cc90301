"""tools/minifier.py

Thin I/O wrapper around ``rcssmin``. All minification semantics belong to the
library; this module only reads, writes and names files.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import rcssmin

from css_benchmark.io import minified_name, write_text_atomic


def minify_css(css: str) -> str:
    return rcssmin.cssmin(css)


async def minify(directory: Path, filename: str) -> Path:
    """Minify ``directory/filename`` into ``directory/<name>.min.<ext>``."""
    src = Path(directory) / filename
    dst = Path(directory) / minified_name(filename)

    css = await asyncio.to_thread(src.read_text, encoding="utf-8")
    styles = await asyncio.to_thread(minify_css, css)
    await asyncio.to_thread(write_text_atomic, dst, styles)
    return dst
