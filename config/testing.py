import os
import tempfile

from ._common import DEFAULT_EMPLOYEES, db_config_from_env

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "file"
DATA_DIR = os.getenv("DATA_DIR", os.path.join(tempfile.gettempdir(), "timecard-test"))
STORAGE_KEY = "timecardRecords"

DB_CONFIG = db_config_from_env()

EMPLOYEES = dict(DEFAULT_EMPLOYEES)
