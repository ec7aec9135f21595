from __future__ import annotations

import itertools

import pytest

from timecard.employees.roster import Roster
from timecard.records.json_record_repository import JsonRecordRepository

from .fakes import InMemoryBlobStore


@pytest.fixture
def blobs() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def repo(blobs) -> JsonRecordRepository:
    return JsonRecordRepository(blobs)


@pytest.fixture
def roster() -> Roster:
    return Roster({"e1": "三島理絵", "e2": "佐藤花子"})


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"r_test_{next(counter)}"
