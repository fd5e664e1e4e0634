from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Sequence
from datetime import date

BOM = "\ufeff"


def render_csv(rows: Iterable[Sequence[object]]) -> str:
    """Spreadsheet-friendly CSV: every cell quoted, BOM prefixed."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return BOM + buffer.getvalue().rstrip("\n")


def export_filename(day: date) -> str:
    return f"staff_stats_{day.isoformat()}.csv"
