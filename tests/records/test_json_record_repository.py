from __future__ import annotations

import json
import logging

import pytest

from timecard.records.json_record_repository import JsonRecordRepository

from ..fakes import InMemoryBlobStore, make_record


def test_load_missing_key_returns_empty(repo):
    assert repo.load() == []


def test_save_then_load_preserves_order_and_fields(repo, blobs):
    records = [
        make_record("r2", "2024-03-02", "10:00", "19:00", overtime_minutes=30),
        make_record("r1", "2024-03-01"),
    ]
    repo.save(records)

    assert blobs.writes == 1
    assert repo.load() == records


def test_saved_blob_uses_camel_case_field_names(repo, blobs):
    repo.save([make_record("r1", "2024-03-01", break_minutes=45)])

    stored = json.loads(blobs.data["timecardRecords"])
    assert stored == [
        {
            "id": "r1",
            "employeeId": "e1",
            "employeeName": "三島理絵",
            "date": "2024-03-01",
            "start": "09:00",
            "end": "18:00",
            "breakMinutes": 45,
            "overtimeMinutes": 0,
        }
    ]
    assert "三島理絵" in blobs.data["timecardRecords"]


def test_absent_fields_take_defaults():
    blobs = InMemoryBlobStore({"timecardRecords": json.dumps([{"id": "r1", "date": "2024-03-01", "start": "09:00", "end": "18:00"}])})

    (rec,) = JsonRecordRepository(blobs).load()

    assert rec.break_minutes == 0
    assert rec.overtime_minutes == 0
    assert rec.employee_name == ""


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        '{"a": 1}',
        "[1, 2]",
        '[{"id": "r1", "breakMinutes": "abc"}]',
        '[{"id": "r1", "breakMinutes": 90.7}]',
        '[{"id": "r1", "overtimeMinutes": Infinity}]',
    ],
)
def test_corrupt_blob_loads_as_empty_and_logs(raw, caplog):
    repo = JsonRecordRepository(InMemoryBlobStore({"timecardRecords": raw}))

    with caplog.at_level(logging.ERROR):
        assert repo.load() == []

    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_whole_number_float_minutes_are_accepted():
    blobs = InMemoryBlobStore({"timecardRecords": '[{"id": "r1", "breakMinutes": 90.0}]'})

    assert JsonRecordRepository(blobs).load()[0].break_minutes == 90


def test_null_blob_is_empty_without_error(caplog):
    repo = JsonRecordRepository(InMemoryBlobStore({"timecardRecords": "null"}))

    with caplog.at_level(logging.ERROR):
        assert repo.load() == []

    assert not caplog.records


def test_custom_key_is_used(blobs):
    repo = JsonRecordRepository(blobs, key="other")
    repo.save([make_record("r1", "2024-03-01")])

    assert "other" in blobs.data
    assert "timecardRecords" not in blobs.data
