from __future__ import annotations

from typing import Protocol, Sequence

from .model import Record


class RecordRepository(Protocol):
    """Whole-collection persistence for records.

    There is no partial update: callers load all records, modify them in memory
    and save all of them back.
    """

    def load(self) -> list[Record]:
        raise NotImplementedError

    def save(self, records: Sequence[Record]) -> None:
        raise NotImplementedError
