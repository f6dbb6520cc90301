import tempfile
import unittest
from pathlib import Path

from css_benchmark.io import OutputPaths, clear_output_dir, minified_name, split_extension


class TestOutputLayout(unittest.TestCase):
    def test_split_extension_uses_last_dot(self) -> None:
        self.assertEqual(("tailwind.config", "js"), split_extension("tailwind.config.js"))
        self.assertEqual(("site", "css"), split_extension("site.css"))
        self.assertEqual(("Makefile", ""), split_extension("Makefile"))

    def test_minified_name(self) -> None:
        self.assertEqual("site.min.css", minified_name("site.css"))
        self.assertEqual("site.min", minified_name("site"))

    def test_output_paths_follow_suffix_convention(self) -> None:
        paths = OutputPaths.for_item("out", "full")
        self.assertEqual(
            [Path("out/full.css"), Path("out/full.min.css"), Path("out/full.min.css.gzip"), Path("out/full.min.css.brotli")],
            list(paths.size_files()),
        )

    def test_clear_output_dir_removes_stale_artifacts(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "output"
            (out / "nested").mkdir(parents=True)
            (out / "stale.css").write_text("x", encoding="utf-8")
            (out / "nested" / "old.css").write_text("y", encoding="utf-8")

            clear_output_dir(out)

            self.assertTrue(out.is_dir())
            self.assertEqual([], list(out.iterdir()))

    def test_clear_output_dir_creates_missing_dir(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = Path(td) / "a" / "b"
            clear_output_dir(out)
            self.assertTrue(out.is_dir())


if __name__ == "__main__":
    unittest.main()
