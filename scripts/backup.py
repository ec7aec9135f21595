"""Backup the timecard record blob.

Copies the current blob (whatever backend is configured) into
``backups/timecard_<timestamp>.json``.
"""

from __future__ import annotations

import importlib
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module
from timecard.container import build_blob_store


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    blobs = build_blob_store(
        backend=settings.STORAGE_BACKEND,
        data_dir=settings.DATA_DIR,
        db_config=settings.DB_CONFIG,
    )

    raw = blobs.get(settings.STORAGE_KEY)
    if raw is None:
        raise SystemExit(f"Nothing to back up: key {settings.STORAGE_KEY!r} is empty.")

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"timecard_{ts}.json"
    out_file.write_text(raw, encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
