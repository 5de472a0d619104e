"""
Helpers for the comma-separated record format used by every data file.

Records are plain ``a,b,c`` lines. Only a record holding a value with a comma
in it is written with csv quoting, and a line is only unquoted when it reads
back as exactly such a record. Any other line, including values that merely
start with a quote such as ``"Heroes"``, is split on commas as-is.
"""

import csv
import io
from typing import Iterable, List


def _split(line: str) -> List[str]:
    return [field.strip() for field in line.split(",")]


def parse_record(line: str) -> List[str]:
    """Split one comma-separated record into trimmed fields."""
    if not line.strip():
        return []
    if '"' not in line:
        return _split(line)

    fields = [field.strip() for field in next(csv.reader([line]))]
    if format_record(fields) == line.strip():
        return fields
    return _split(line)


def format_record(fields: Iterable[str]) -> str:
    """Join fields into one record line (without line terminator)."""
    fields = list(fields)
    if not any("," in field for field in fields):
        return ",".join(fields)

    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="").writerow(fields)
    return buffer.getvalue()
