"""pipeline.models

Lightweight data structures used across the pipeline.

Why this exists
---------------
Per-item work can fail halfway (a build exits non-zero, a framework package is
not installed). Rather than letting a failed item turn into a ``None`` that
every later stage has to remember to skip, each item produces an explicit
:class:`ItemResult` carrying either a :class:`StatsRecord` or the reason it
failed. The reporter only ever sees successful records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

UNAVAILABLE = "—"

TABLE_HEADER: Tuple[str, ...] = (
    "Config",
    "Original",
    "Minified",
    "Gzip",
    "Brotli",
    "Classes",
    "Declarations",
    "Color Declarations",
)


def bytes_to_display(size: int) -> str:
    """Render a byte count as kibibytes with one decimal: ``1536 -> "1.5K"``."""
    return f"{size / 1024:.1f}K"


@dataclass(frozen=True)
class FileSizes:
    """Display strings for the four size columns."""

    original: str
    minified: str
    gzipped: str
    brotlified: str

    @classmethod
    def from_bytes(cls, original: int, minified: int, gzipped: int, brotlified: int) -> "FileSizes":
        return cls(
            original=bytes_to_display(original),
            minified=bytes_to_display(minified),
            gzipped=bytes_to_display(gzipped),
            brotlified=bytes_to_display(brotlified),
        )


@dataclass(frozen=True)
class CssStats:
    """Lexical counts over minified CSS (see :mod:`pipeline.css_stats`)."""

    classes: int = 0
    declarations: int = 0
    color_declarations: int = 0


@dataclass(frozen=True)
class StatsRecord:
    """One table row: a label plus seven display values."""

    label: str
    original: str
    minified: str
    gzipped: str
    brotlified: str
    classes: str = UNAVAILABLE
    declarations: str = UNAVAILABLE
    color_declarations: str = UNAVAILABLE

    @classmethod
    def build(cls, label: str, sizes: FileSizes, stats: Optional[CssStats] = None) -> "StatsRecord":
        if stats is None:
            return cls(label, sizes.original, sizes.minified, sizes.gzipped, sizes.brotlified)
        return cls(
            label,
            sizes.original,
            sizes.minified,
            sizes.gzipped,
            sizes.brotlified,
            str(stats.classes),
            str(stats.declarations),
            str(stats.color_declarations),
        )

    @property
    def values(self) -> Tuple[str, ...]:
        return (
            self.original,
            self.minified,
            self.gzipped,
            self.brotlified,
            self.classes,
            self.declarations,
            self.color_declarations,
        )

    def row(self) -> Tuple[str, ...]:
        return (self.label,) + self.values


@dataclass(frozen=True)
class ItemResult:
    """Outcome of benchmarking one configuration or framework."""

    label: str
    kind: str  # "build" | "framework"
    record: Optional[StatsRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def success(cls, label: str, kind: str, record: StatsRecord) -> "ItemResult":
        return cls(label=label, kind=kind, record=record)

    @classmethod
    def failure(cls, label: str, kind: str, error: BaseException) -> "ItemResult":
        return cls(label=label, kind=kind, error=f"{type(error).__name__}: {error}")


def successful_records(results: Iterable[ItemResult]) -> List[StatsRecord]:
    """Records of the successful results, order preserved."""
    return [r.record for r in results if r.record is not None]


@dataclass(frozen=True)
class BenchmarkReport:
    """Everything one run produced: build results first, then frameworks."""

    results: List[ItemResult] = field(default_factory=list)

    @property
    def records(self) -> List[StatsRecord]:
        return successful_records(self.results)

    @property
    def failures(self) -> List[ItemResult]:
        return [r for r in self.results if not r.ok]
