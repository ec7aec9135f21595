from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..common.timeutils import hours_to_minutes, month_of, parse_hours, parse_time_to_minutes
from ..common.validators import require_non_empty
from ..core.constants import RECORD_ID_PREFIX
from ..core.exceptions import RecordNotFoundError, ValidationError
from ..employees.roster import Roster
from ..records.model import Record
from ..records.repository import RecordRepository
from .session import EditSession, FormFields

logger = logging.getLogger(__name__)


def generate_id() -> str:
    """Timestamp plus random bits; collisions are not checked."""
    return f"{RECORD_ID_PREFIX}{int(time.time() * 1000)}_{secrets.token_hex(6)}"


@dataclass(frozen=True)
class CommitResult:
    record: Optional[Record]
    created: bool


class TimesheetFormService:
    """Write side of the timecard: commit and delete against the record store."""

    def __init__(
        self,
        records: RecordRepository,
        roster: Roster,
        *,
        id_factory: Callable[[], str] = generate_id,
    ):
        self._records = records
        self._roster = roster
        self._id_factory = id_factory

    def find(self, record_id: str) -> Record:
        for rec in self._records.load():
            if rec.id == record_id:
                return rec
        raise RecordNotFoundError("レコードが見つかりません。")

    def commit(self, session: EditSession, fields: FormFields) -> CommitResult:
        """Validate ``fields`` and create or update a record.

        Raises ``ValidationError`` without touching the store or the session.
        """
        employee = self._roster.get(fields.employee_id)
        if not employee:
            raise ValidationError("社員を選択してください。")
        require_non_empty(fields.date, "日付を入力してください。")
        date, start, end = fields.date, fields.start, fields.end
        if not (fields.start or "").strip() or not (fields.end or "").strip():
            raise ValidationError("出勤と退勤の時刻を入力してください。")

        break_minutes = hours_to_minutes(parse_hours(fields.break_hours))
        overtime_minutes = parse_time_to_minutes(fields.overtime)

        records = self._records.load()
        created = not session.is_editing()
        saved: Optional[Record] = None

        if created:
            saved = Record(
                id=self._id_factory(),
                employee_id=employee.id,
                employee_name=employee.name,
                date=date,
                start=start,
                end=end,
                break_minutes=break_minutes,
                overtime_minutes=overtime_minutes,
            )
            records.append(saved)
        else:
            saved = next((r for r in records if r.id == session.editing_id), None)
            if saved is None:
                logger.warning("Record %s disappeared before it could be updated", session.editing_id)
            else:
                saved.employee_id = employee.id
                saved.employee_name = employee.name
                saved.date = date
                saved.start = start
                saved.end = end
                saved.break_minutes = break_minutes
                saved.overtime_minutes = overtime_minutes

        if month_of(date):
            session.month = month_of(date)

        self._records.save(records)
        session.fields = fields
        session.reset()
        return CommitResult(record=saved, created=created)

    def delete(self, session: EditSession, record_id: str) -> bool:
        records = self._records.load()
        remaining = [r for r in records if r.id != record_id]
        removed = len(remaining) != len(records)
        self._records.save(remaining)
        if session.is_editing(record_id):
            session.reset()
        return removed
