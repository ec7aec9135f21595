from __future__ import annotations

import csv
import io
from typing import Iterable

from ..common.timeutils import format_minutes
from ..records.model import SummaryRow

CSV_HEADER = ["日付", "社員名", "出勤", "退勤", "休憩", "実働", "残業"]
CSV_LINE_TERMINATOR = "\r\n"


def _row_values(r: SummaryRow) -> list[str]:
    return [
        r.date,
        r.employee_name,
        r.start,
        r.end,
        format_minutes(r.break_minutes),
        format_minutes(r.work_minutes) if r.has_work_minutes else "",
        format_minutes(r.overtime_minutes),
    ]


def build_summary_csv(rows: Iterable[SummaryRow]) -> bytes:
    """Render summary rows as a UTF-8 (BOM) CSV that spreadsheet apps open directly.

    Every field is quoted, lines end with CRLF and the last line has no terminator.
    """
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator=CSV_LINE_TERMINATOR)
    writer.writerow(CSV_HEADER)
    for r in rows:
        writer.writerow([v or "" for v in _row_values(r)])

    text = out.getvalue().removesuffix(CSV_LINE_TERMINATOR)
    return text.encode("utf-8-sig")


def csv_filename(month: str) -> str:
    return f"timecard_{month}.csv"
