from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol


class BlobStore(Protocol):
    """Key-value store of text blobs (one key holds the whole record list)."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class FileBlobStore(BlobStore):
    """Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory which then replaces the
    target, so readers never see a half-written blob.
    """

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, self._path(key))
        except Exception:
            Path(tmp).unlink(missing_ok=True)
            raise
