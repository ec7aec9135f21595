from __future__ import annotations

import json
import logging
from typing import Sequence

from ..core.constants import STORAGE_KEY
from ..storage.blob_store import BlobStore
from .model import Record
from .repository import RecordRepository

logger = logging.getLogger(__name__)


class JsonRecordRepository(RecordRepository):
    """Record list serialized as one JSON array under a single blob key."""

    def __init__(self, blobs: BlobStore, *, key: str = STORAGE_KEY):
        self._blobs = blobs
        self._key = key

    def load(self) -> list[Record]:
        try:
            raw = self._blobs.get(self._key)
            if raw is None:
                return []
            data = json.loads(raw)
            if data is None:
                return []
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [Record.from_dict(item) for item in data]
        except (ValueError, TypeError) as e:
            # Corrupt blob: behave as an empty store, the next save overwrites it.
            logger.error("Could not read records from %r: %s", self._key, e)
            return []

    def save(self, records: Sequence[Record]) -> None:
        payload = json.dumps([r.to_dict() for r in records], ensure_ascii=False)
        self._blobs.set(self._key, payload)
