from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .storage.blob_store import BlobStore
from .timesheet.controller import register as register_timesheet

logger = logging.getLogger(__name__)


def create_app(*, blobs: Optional[BlobStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    backend = getattr(settings, "STORAGE_BACKEND", "file")
    data_dir = getattr(settings, "DATA_DIR", "data")
    logger.info("settings=%s storage=%s data_dir=%s", settings_module, backend, data_dir)

    container = build_container(
        employees=getattr(settings, "EMPLOYEES"),
        blobs=blobs,
        storage_backend=backend,
        data_dir=data_dir,
        db_config=getattr(settings, "DB_CONFIG", None),
        storage_key=getattr(settings, "STORAGE_KEY", "timecardRecords"),
    )
    app.extensions["timecard"] = container

    register_timesheet(app, container)

    return app
