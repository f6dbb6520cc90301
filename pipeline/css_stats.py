"""pipeline.css_stats

Structural statistics over minified CSS.

These are lexical heuristics, not a CSS parse. They are accurate for
single-line minified CSS without comments or block at-rules; anything else
gives an approximation. The counting lives behind :class:`CssStatsStrategy` so
a real parser can replace it without touching the measurer or the runner.
"""

from __future__ import annotations

import re
from typing import Protocol

from pipeline.models import CssStats

# ".foo{" / ".sm\:p-4:hover{"
CLASS_SELECTOR_RE = re.compile(r"(\.[^{} ]*)\{")
# Any selector immediately before "{", including element/id/attribute ones.
BLOCK_RE = re.compile(r"([^{} ]*)\{")
# First property of a block is a color property.
COLOR_DECLARATION_RE = re.compile(r"\{(background-color|border-color|color)")


class CssStatsStrategy(Protocol):
    def count(self, css: str) -> CssStats: ...


def _count(pattern: "re.Pattern[str]", text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


class RegexCssStats:
    """Default strategy: count pattern matches in the raw text."""

    def count(self, css: str) -> CssStats:
        return CssStats(
            classes=_count(CLASS_SELECTOR_RE, css),
            declarations=_count(BLOCK_RE, css),
            color_declarations=_count(COLOR_DECLARATION_RE, css),
        )


DEFAULT_STRATEGY: CssStatsStrategy = RegexCssStats()
