"""pipeline.report

Render and export benchmark records.

The console table is rendered with ``rich``; rows keep the order they are
given in (builds first, then frameworks). JSON and CSV exports carry the same
cells for downstream tooling.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from rich.console import Console
from rich.table import Table

from css_benchmark.io import write_csv_atomic, write_json_atomic
from pipeline.models import TABLE_HEADER, BenchmarkReport, StatsRecord


def build_table(records: Iterable[StatsRecord]) -> Table:
    table = Table(*TABLE_HEADER)
    for record in records:
        table.add_row(*record.row())
    return table


def display(records: Iterable[StatsRecord], console: Optional[Console] = None) -> None:
    """Print the comparison table to stdout (or *console*)."""
    (console or Console()).print(build_table(records))


def report_to_dict(report: BenchmarkReport) -> Dict[str, Any]:
    rows: List[Dict[str, str]] = [dict(zip(TABLE_HEADER, r.row())) for r in report.records]
    failures = [{"label": f.label, "kind": f.kind, "error": f.error} for f in report.failures]
    return {"header": list(TABLE_HEADER), "rows": rows, "failures": failures}


def write_report_json(path: Path, report: BenchmarkReport) -> None:
    write_json_atomic(Path(path), report_to_dict(report))


def write_report_csv(path: Path, records: Iterable[StatsRecord]) -> None:
    write_csv_atomic(Path(path), (r.row() for r in records), header=TABLE_HEADER)


def format_failures(report: BenchmarkReport) -> List[str]:
    """One line per failed item, for the end-of-run summary."""
    lines: List[str] = []
    for f in report.failures:
        first = (f.error or "").splitlines()
        lines.append(f"{f.kind} {f.label}: {first[0] if first else 'unknown error'}")
    return lines
