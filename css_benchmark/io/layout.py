"""css_benchmark.io.layout

Canonical artifact names inside the output directory.

For a base name ``tailwind-full`` a run produces::

  tailwind-full.css              build output (or copied framework css)
  tailwind-full.min.css          minified
  tailwind-full.min.css.gzip     gzip of the minified file
  tailwind-full.min.css.brotli   brotli of the minified file

The builders, the framework loader and the measurer all derive paths from
:class:`OutputPaths` so the suffix convention lives in one place.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

GZIP_SUFFIX = ".gzip"
BROTLI_SUFFIX = ".brotli"

# Split at the last dot only: "a.b.css" -> ("a.b", "css").
_LAST_DOT_RE = re.compile(r"\.(?=[^.]+$)")


def split_extension(filename: str) -> Tuple[str, str]:
    """Split *filename* at its last dot into ``(name, extension)``.

    Names without a dot (or ending in one) have an empty extension.
    """
    parts = _LAST_DOT_RE.split(filename, maxsplit=1)
    if len(parts) == 1:
        return filename, ""
    return parts[0], parts[1]


def minified_name(filename: str) -> str:
    """``site.css`` -> ``site.min.css``; ``site`` -> ``site.min``."""
    name, ext = split_extension(filename)
    return f"{name}.min.{ext}" if ext else f"{name}.min"


@dataclass(frozen=True)
class OutputPaths:
    """Artifact paths for one benchmarked item."""

    output_dir: Path
    name: str

    @classmethod
    def for_item(cls, output_dir: Union[str, Path], name: str) -> "OutputPaths":
        return cls(output_dir=Path(output_dir), name=name)

    @property
    def css(self) -> Path:
        return self.output_dir / f"{self.name}.css"

    @property
    def minified(self) -> Path:
        return self.output_dir / minified_name(self.css.name)

    @property
    def gzip(self) -> Path:
        return self.output_dir / f"{self.minified.name}{GZIP_SUFFIX}"

    @property
    def brotli(self) -> Path:
        return self.output_dir / f"{self.minified.name}{BROTLI_SUFFIX}"

    def size_files(self) -> Tuple[Path, Path, Path, Path]:
        """The four files whose sizes are reported, in table order."""
        return (self.css, self.minified, self.gzip, self.brotli)
