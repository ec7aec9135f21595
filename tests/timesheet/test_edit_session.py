from __future__ import annotations

from timecard.core.enums import EditMode
from timecard.timesheet.session import EditSession, FormFields

from ..fakes import make_record


def test_new_session_is_creating_with_defaults():
    session = EditSession()

    assert session.mode == EditMode.CREATING
    assert not session.is_editing()
    assert session.fields == FormFields(start="09:00", end="18:00", break_hours="1.0", overtime="00:00")


def test_select_prefills_fields_from_record():
    session = EditSession()
    session.select(make_record("r1", "2024-03-05", "08:30", "17:15", break_minutes=90, overtime_minutes=75))

    assert session.mode == EditMode.EDITING
    assert session.is_editing("r1")
    assert not session.is_editing("r2")
    assert session.fields == FormFields(
        employee_id="e1",
        date="2024-03-05",
        start="08:30",
        end="17:15",
        break_hours="1.5",
        overtime="01:15",
    )


def test_whole_hour_break_renders_without_decimal():
    session = EditSession()
    session.select(make_record("r1", "2024-03-05", break_minutes=60))

    assert session.fields.break_hours == "1"


def test_reset_returns_to_creating_and_keeps_employee_and_date():
    session = EditSession()
    session.select(make_record("r1", "2024-03-05", "08:30", "17:15", break_minutes=30))

    session.reset()

    assert session.mode == EditMode.CREATING
    assert session.fields.employee_id == "e1"
    assert session.fields.date == "2024-03-05"
    assert (session.fields.start, session.fields.end) == ("09:00", "18:00")
    assert (session.fields.break_hours, session.fields.overtime) == ("1.0", "00:00")


def test_mapping_round_trip():
    session = EditSession(month="2024-03")
    session.select(make_record("r1", "2024-03-05"))

    restored = EditSession.from_mapping(session.to_mapping())

    assert restored == session


def test_from_mapping_uses_defaults_and_ignores_unknown_keys():
    defaults = FormFields(employee_id="e1", date="2024-05-01")

    restored = EditSession.from_mapping({"fields": {"start": "07:00", "bogus": "x"}}, defaults=defaults)

    assert restored.editing_id is None
    assert restored.fields.employee_id == "e1"
    assert restored.fields.date == "2024-05-01"
    assert restored.fields.start == "07:00"
    assert EditSession.from_mapping(None) == EditSession()
