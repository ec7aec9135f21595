from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.constants import INVALID_WORK_MINUTES


def _minutes_field(value: Any) -> int:
    """Stored minute counts are whole numbers; fractional or non-finite ones are corrupt."""
    value = value or 0
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"minute field must be a whole number, got {value!r}")
    return int(value)


@dataclass
class Record:
    """Domain entity: one attendance entry for one employee on one date.

    Mutable on purpose: edits change the loaded record in place before the whole
    list is saved back.
    """

    id: str
    employee_id: str
    employee_name: str
    date: str
    start: str
    end: str
    break_minutes: int = 0
    overtime_minutes: int = 0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "date": self.date,
            "start": self.start,
            "end": self.end,
            "breakMinutes": self.break_minutes,
            "overtimeMinutes": self.overtime_minutes,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        """Build a record from its stored form; absent fields take defaults."""
        if not isinstance(data, Mapping):
            raise TypeError(f"Record entry must be an object, got {type(data).__name__}")
        return cls(
            id=str(data.get("id") or ""),
            employee_id=str(data.get("employeeId") or ""),
            employee_name=str(data.get("employeeName") or ""),
            date=str(data.get("date") or ""),
            start=str(data.get("start") or ""),
            end=str(data.get("end") or ""),
            break_minutes=_minutes_field(data.get("breakMinutes")),
            overtime_minutes=_minutes_field(data.get("overtimeMinutes")),
        )


@dataclass(frozen=True)
class SummaryRow:
    """Read-model for the monthly table and CSV export (not persisted)."""

    date: str
    employee_name: str
    start: str
    end: str
    break_minutes: int
    overtime_minutes: int
    work_minutes: int

    @property
    def has_work_minutes(self) -> bool:
        return self.work_minutes != INVALID_WORK_MINUTES


@dataclass(frozen=True)
class MonthlyTotals:
    days: int = 0
    work_minutes: int = 0
    overtime_minutes: int = 0
    invalid_days: int = 0
