from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .core.constants import STORAGE_KEY
from .database.connection import DatabaseConnection
from .employees.roster import Roster
from .records.json_record_repository import JsonRecordRepository
from .records.service import RecordQueryService
from .storage.blob_store import BlobStore, FileBlobStore
from .storage.mysql_blob_store import MySQLBlobStore
from .timesheet.service import TimesheetFormService


@dataclass(frozen=True)
class Container:
    blobs: BlobStore
    roster: Roster

    records_repo: JsonRecordRepository

    query_service: RecordQueryService
    form_service: TimesheetFormService


def build_blob_store(*, backend: str, data_dir: str | Path, db_config: Optional[dict] = None) -> BlobStore:
    backend = (backend or "file").lower()
    if backend == "file":
        return FileBlobStore(data_dir)
    if backend == "mysql":
        store = MySQLBlobStore(DatabaseConnection.from_settings(db_config or {}))
        store.ensure_schema()
        return store
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    employees: Mapping[str, str],
    blobs: Optional[BlobStore] = None,
    storage_backend: str = "file",
    data_dir: str | Path = "data",
    db_config: Optional[dict] = None,
    storage_key: str = STORAGE_KEY,
) -> Container:
    blobs = blobs or build_blob_store(backend=storage_backend, data_dir=data_dir, db_config=db_config)
    roster = Roster(employees)

    records_repo = JsonRecordRepository(blobs, key=storage_key)

    query_service = RecordQueryService(records_repo, roster)
    form_service = TimesheetFormService(records_repo, roster)

    return Container(
        blobs=blobs,
        roster=roster,
        records_repo=records_repo,
        query_service=query_service,
        form_service=form_service,
    )
