from __future__ import annotations

import codecs

from timecard.export.csv_export import build_summary_csv, csv_filename
from timecard.records.model import SummaryRow


def _row(**overrides) -> SummaryRow:
    base = dict(
        date="2024-03-01",
        employee_name="三島理絵",
        start="09:00",
        end="18:00",
        break_minutes=60,
        overtime_minutes=30,
        work_minutes=480,
    )
    base.update(overrides)
    return SummaryRow(**base)


def test_csv_has_bom_crlf_and_quoted_fields():
    data = build_summary_csv([_row(), _row(date="2024-03-02", work_minutes=-1)])

    assert data.startswith(codecs.BOM_UTF8)
    text = data[len(codecs.BOM_UTF8):].decode("utf-8")
    assert text.split("\r\n") == [
        '"日付","社員名","出勤","退勤","休憩","実働","残業"',
        '"2024-03-01","三島理絵","09:00","18:00","01:00","08:00","00:30"',
        '"2024-03-02","三島理絵","09:00","18:00","01:00","","00:30"',
    ]
    assert not text.endswith("\r\n")


def test_csv_doubles_embedded_quotes():
    data = build_summary_csv([_row(employee_name='A "B" C')])

    assert '"A ""B"" C"' in data.decode("utf-8-sig")


def test_csv_with_no_rows_is_header_only():
    assert build_summary_csv([]).decode("utf-8-sig") == '"日付","社員名","出勤","退勤","休憩","実働","残業"'


def test_csv_filename():
    assert csv_filename("2024-03") == "timecard_2024-03.csv"
