import asyncio
import tempfile
import unittest
from pathlib import Path

from pipeline.css_stats import RegexCssStats
from pipeline.measure import get_css_stats
from pipeline.models import CssStats


class TestRegexCssStats(unittest.TestCase):
    def test_counts_on_minified_fixture(self) -> None:
        css = ".a{color:red}.b{background-color:blue}div{color:green}"
        stats = RegexCssStats().count(css)
        self.assertEqual(CssStats(classes=2, declarations=3, color_declarations=3), stats)

    def test_no_matches_count_as_zero(self) -> None:
        for css in ("", "   ", "\n\t"):
            with self.subTest(css=css):
                self.assertEqual(CssStats(0, 0, 0), RegexCssStats().count(css))

    def test_border_color_and_pseudo_classes(self) -> None:
        css = ".btn:hover{border-color:#000}#main{margin:0}.x{padding:0;color:red}"
        stats = RegexCssStats().count(css)
        # Only the first property of a block is inspected for colors.
        self.assertEqual(2, stats.classes)
        self.assertEqual(3, stats.declarations)
        self.assertEqual(1, stats.color_declarations)

    def test_get_css_stats_accepts_a_custom_strategy(self) -> None:
        class Fixed:
            def count(self, css: str) -> CssStats:
                return CssStats(classes=len(css))

        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "x.min.css"
            p.write_text("abc", encoding="utf-8")
            self.assertEqual(CssStats(classes=3), asyncio.run(get_css_stats(p, Fixed())))
            self.assertEqual(CssStats(0, 0, 0), asyncio.run(get_css_stats(p)))


if __name__ == "__main__":
    unittest.main()
