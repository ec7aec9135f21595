from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Mapping, Optional

from ..common.timeutils import format_minutes
from ..core.constants import DEFAULT_BREAK_HOURS, DEFAULT_END, DEFAULT_OVERTIME, DEFAULT_START
from ..core.enums import EditMode
from ..records.model import Record


@dataclass(frozen=True)
class FormFields:
    """Working values of the timecard form, kept as the raw strings the user typed."""

    employee_id: str = ""
    date: str = ""
    start: str = DEFAULT_START
    end: str = DEFAULT_END
    break_hours: str = DEFAULT_BREAK_HOURS
    overtime: str = DEFAULT_OVERTIME

    def cleared(self) -> "FormFields":
        """Defaults for the time fields; employee and date are kept."""
        return replace(
            self,
            start=DEFAULT_START,
            end=DEFAULT_END,
            break_hours=DEFAULT_BREAK_HOURS,
            overtime=DEFAULT_OVERTIME,
        )

    @classmethod
    def from_record(cls, record: Record) -> "FormFields":
        return cls(
            employee_id=record.employee_id,
            date=record.date,
            start=record.start,
            end=record.end,
            break_hours=_hours_text((record.break_minutes or 0) / 60),
            overtime=format_minutes(record.overtime_minutes or 0),
        )


def _hours_text(hours: float) -> str:
    # 1.0 -> "1", 1.5 -> "1.5", 0.3333.. -> "0.3333333333333333"
    return str(int(hours)) if float(hours).is_integer() else str(hours)


@dataclass
class EditSession:
    """Form state machine: Creating (``editing_id is None``) or Editing(id).

    ``month`` is the active month selector (``YYYY-MM``); a successful commit
    moves it to the saved record's month.
    """

    fields: FormFields = field(default_factory=FormFields)
    editing_id: Optional[str] = None
    month: str = ""

    @property
    def mode(self) -> EditMode:
        return EditMode.CREATING if self.editing_id is None else EditMode.EDITING

    def is_editing(self, record_id: Optional[str] = None) -> bool:
        if self.editing_id is None:
            return False
        return record_id is None or self.editing_id == record_id

    def select(self, record: Record) -> None:
        self.editing_id = record.id
        self.fields = FormFields.from_record(record)

    def reset(self) -> None:
        self.editing_id = None
        self.fields = self.fields.cleared()

    def to_mapping(self) -> dict:
        return {"editing_id": self.editing_id, "month": self.month, "fields": asdict(self.fields)}

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]], *, defaults: Optional[FormFields] = None) -> "EditSession":
        data = data or {}
        base = defaults or FormFields()
        raw_fields = data.get("fields") or {}
        known = {k: str(v) for k, v in raw_fields.items() if k in FormFields.__dataclass_fields__ and v is not None}
        return cls(
            fields=replace(base, **known),
            editing_id=data.get("editing_id") or None,
            month=str(data.get("month") or ""),
        )
