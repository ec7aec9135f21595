from __future__ import annotations

from typing import Optional

from ..common.timeutils import calc_work_minutes, year_month
from ..core.constants import ALL_EMPLOYEES, INVALID_WORK_MINUTES
from ..employees.roster import Roster
from .model import MonthlyTotals, Record, SummaryRow
from .repository import RecordRepository


class RecordQueryService:
    """Read side: month/employee filtering, ordering and derived summary rows."""

    def __init__(self, records: RecordRepository, roster: Optional[Roster] = None):
        self._records = records
        self._roster = roster

    def get_records_by_month(self, month_value: Optional[str], employee_id: str = ALL_EMPLOYEES) -> list[Record]:
        """Records of one month, sorted by (date, start).

        Month matching compares the integer year/month parts of the ``date``
        string directly.
        """
        target = year_month(month_value)
        if target is None:
            return []

        def matches(rec: Record) -> bool:
            if year_month(rec.date) != target:
                return False
            return employee_id == ALL_EMPLOYEES or rec.employee_id == employee_id

        rows = [r for r in self._records.load() if matches(r)]
        rows.sort(key=lambda r: (r.date, r.start))
        return rows

    def get_monthly_summary(self, month_value: Optional[str], employee_id: str = ALL_EMPLOYEES) -> list[SummaryRow]:
        return [
            SummaryRow(
                date=r.date,
                employee_name=r.employee_name,
                start=r.start,
                end=r.end,
                break_minutes=r.break_minutes or 0,
                overtime_minutes=r.overtime_minutes or 0,
                work_minutes=calc_work_minutes(r.start, r.end, r.break_minutes),
            )
            for r in self.get_records_by_month(month_value, employee_id)
        ]

    def get_monthly_totals(self, month_value: Optional[str], employee_id: str = ALL_EMPLOYEES) -> MonthlyTotals:
        return summarize(self.get_monthly_summary(month_value, employee_id))

    def summary_title(self, employee_id: str) -> str:
        name = self._roster.display_name(employee_id) if self._roster else ""
        return f"{name} さんの月次集計" if name else "月次集計"


def summarize(rows: list[SummaryRow]) -> MonthlyTotals:
    valid = [r.work_minutes for r in rows if r.work_minutes != INVALID_WORK_MINUTES]
    return MonthlyTotals(
        days=len(rows),
        work_minutes=sum(valid),
        overtime_minutes=sum(r.overtime_minutes for r in rows),
        invalid_days=len(rows) - len(valid),
    )
