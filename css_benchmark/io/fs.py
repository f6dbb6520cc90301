"""css_benchmark.io.fs

Atomic, stable filesystem writers.

Why this module exists
----------------------
Several build and framework tasks write into the same output directory at the
same time. Each task owns its own filenames, but a reader (the measurer, or a
person looking at ``output/`` while a run is in progress) must never observe a
half-written artifact. Every writer here goes through a temp file and
``os.replace()``.

The output directory itself is reset once per run by :func:`clear_output_dir`.
"""

from __future__ import annotations

import csv
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Sequence


def _atomic_write(
    path: Path,
    write_fn: Callable[[Any], None],
    *,
    binary: bool = False,
    encoding: str = "utf-8",
    newline: Optional[str] = None,
) -> None:
    """Write a file atomically by writing to a temp file and os.replace()."""

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f"{p.name}.", suffix=".tmp", dir=str(p.parent))
    tmp_path = Path(tmp_name)

    try:
        if binary:
            f = os.fdopen(fd, "wb")
        else:
            f = os.fdopen(fd, "w", encoding=encoding, newline=newline)
        with f:
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, p)
    finally:
        # If os.replace fails, remove the temp file so the directory stays clean.
        if tmp_path.exists():
            tmp_path.unlink()


def write_bytes_atomic(path: Path, data: bytes) -> None:
    """Write raw bytes atomically."""

    _atomic_write(Path(path), lambda f: f.write(data), binary=True)


def write_text_atomic(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Write UTF-8 text atomically."""

    _atomic_write(Path(path), lambda f: f.write(text), encoding=encoding)


def write_json_atomic(
    path: Path,
    data: Any,
    *,
    indent: int = 2,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
    encoding: str = "utf-8",
) -> None:
    """Write JSON atomically with stable formatting."""

    def _write(f) -> None:
        json.dump(data, f, indent=indent, sort_keys=sort_keys, ensure_ascii=ensure_ascii)
        f.write("\n")

    _atomic_write(Path(path), _write, encoding=encoding)


def write_csv_atomic(
    path: Path,
    rows: Iterable[Sequence[Any]],
    *,
    header: Sequence[str],
    encoding: str = "utf-8",
) -> None:
    """Write a header plus positional rows as CSV, atomically."""

    rows_list = [list(r) for r in rows]

    def _write(f) -> None:
        w = csv.writer(f)
        w.writerow(list(header))
        w.writerows(rows_list)

    # newline="" is the recommended way to write CSV files.
    _atomic_write(Path(path), _write, encoding=encoding, newline="")


def clear_output_dir(output_dir: Path) -> Path:
    """Remove everything inside *output_dir*, creating it if needed.

    The directory itself is kept so that a shell sitting inside it (or a
    symlink pointing at it) survives the reset.
    """

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    for child in out.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
    return out

