"""tools/compressor.py

Write gzip and brotli siblings of a file.

Both encodings are computed concurrently in worker threads. gzip output uses a
fixed mtime so repeated runs over the same input are byte-identical.
"""

from __future__ import annotations

import asyncio
import gzip
from pathlib import Path

import brotli

from css_benchmark.io import BROTLI_SUFFIX, GZIP_SUFFIX, write_bytes_atomic

# zlib's default level, which is what node's zlib.gzip uses.
GZIP_LEVEL = 6
BROTLI_QUALITY = 11


def gzip_bytes(data: bytes) -> bytes:
    return gzip.compress(data, compresslevel=GZIP_LEVEL, mtime=0)


def brotli_bytes(data: bytes) -> bytes:
    return brotli.compress(data, quality=BROTLI_QUALITY)


async def compress(path: Path) -> None:
    """Write ``<path>.gzip`` and ``<path>.brotli`` next to *path*."""
    p = Path(path)
    data = await asyncio.to_thread(p.read_bytes)

    gz, br = await asyncio.gather(
        asyncio.to_thread(gzip_bytes, data),
        asyncio.to_thread(brotli_bytes, data),
    )
    await asyncio.gather(
        asyncio.to_thread(write_bytes_atomic, p.with_name(p.name + GZIP_SUFFIX), gz),
        asyncio.to_thread(write_bytes_atomic, p.with_name(p.name + BROTLI_SUFFIX), br),
    )
