import unittest

from pipeline.models import (
    TABLE_HEADER,
    UNAVAILABLE,
    BenchmarkReport,
    CssStats,
    FileSizes,
    ItemResult,
    StatsRecord,
    bytes_to_display,
    successful_records,
)


class TestBytesToDisplay(unittest.TestCase):
    def test_kibibytes_with_one_decimal(self) -> None:
        self.assertEqual("1.0K", bytes_to_display(1024))
        self.assertEqual("1.5K", bytes_to_display(1536))
        self.assertEqual("0.0K", bytes_to_display(0))
        self.assertEqual("2048.0K", bytes_to_display(2 * 1024 * 1024))


class TestStatsRecord(unittest.TestCase):
    def test_build_record_has_seven_values(self) -> None:
        sizes = FileSizes.from_bytes(2048, 1024, 512, 256)
        rec = StatsRecord.build("full", sizes, CssStats(10, 12, 3))

        self.assertEqual(("2.0K", "1.0K", "0.5K", "0.2K", "10", "12", "3"), rec.values)
        self.assertEqual(len(TABLE_HEADER), len(rec.row()))
        self.assertEqual("full", rec.row()[0])

    def test_framework_record_uses_placeholders(self) -> None:
        rec = StatsRecord.build("bulma", FileSizes.from_bytes(1, 1, 1, 1))
        self.assertEqual((UNAVAILABLE,) * 3, rec.values[4:])


class TestItemResults(unittest.TestCase):
    def test_failures_are_filtered_before_reporting(self) -> None:
        ok = ItemResult.success("a", "build", StatsRecord.build("a", FileSizes.from_bytes(0, 0, 0, 0)))
        bad = ItemResult.failure("b", "build", RuntimeError("boom"))
        fw = ItemResult.success("tachyons", "framework", StatsRecord.build("tachyons", FileSizes.from_bytes(0, 0, 0, 0)))

        report = BenchmarkReport(results=[ok, bad, fw])

        self.assertFalse(bad.ok)
        self.assertEqual("RuntimeError: boom", bad.error)
        self.assertEqual(["a", "tachyons"], [r.label for r in report.records])
        self.assertEqual(["b"], [r.label for r in report.failures])
        self.assertEqual(report.records, successful_records(report.results))


if __name__ == "__main__":
    unittest.main()
