from __future__ import annotations

from typing import Iterator, Mapping, Optional

from ..core.constants import ALL_EMPLOYEES
from .model import Employee


class Roster:
    """Static, ordered list of known employees built from configuration."""

    def __init__(self, employees: Mapping[str, str]):
        self._employees = [Employee(id=str(k), name=str(v)) for k, v in employees.items()]
        self._by_id = {e.id: e for e in self._employees}

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __len__(self) -> int:
        return len(self._employees)

    def get(self, employee_id: Optional[str]) -> Optional[Employee]:
        if not employee_id:
            return None
        return self._by_id.get(employee_id)

    def first(self) -> Optional[Employee]:
        return self._employees[0] if self._employees else None

    def display_name(self, employee_filter: str) -> str:
        if employee_filter == ALL_EMPLOYEES:
            return self._employees[0].name if len(self._employees) == 1 else ""
        employee = self.get(employee_filter)
        return employee.name if employee else ""


def parse_roster(value: str) -> dict[str, str]:
    """Parse ``"e1:Name,e2:Other"`` into an ordered id -> name mapping."""
    roster: dict[str, str] = {}
    for item in (value or "").split(","):
        emp_id, sep, name = item.partition(":")
        if sep and emp_id.strip() and name.strip():
            roster[emp_id.strip()] = name.strip()
    return roster
