"""css_benchmark.io

Filesystem contracts and IO helpers.

Design principle
----------------
The output directory layout is a public contract: the build tools write
artifacts under names that the measurer later reads back. Keeping the naming
rules here means neither side re-implements them.
"""

from __future__ import annotations

from .fs import (
    clear_output_dir,
    write_bytes_atomic,
    write_csv_atomic,
    write_json_atomic,
    write_text_atomic,
)
from .layout import (
    BROTLI_SUFFIX,
    GZIP_SUFFIX,
    OutputPaths,
    minified_name,
    split_extension,
)

__all__ = [
    "BROTLI_SUFFIX",
    "GZIP_SUFFIX",
    "OutputPaths",
    "clear_output_dir",
    "minified_name",
    "split_extension",
    "write_bytes_atomic",
    "write_csv_atomic",
    "write_json_atomic",
    "write_text_atomic",
]
