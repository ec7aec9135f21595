import os

from ._common import db_config_from_env, employees_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "/var/lib/timecard")
STORAGE_KEY = os.getenv("STORAGE_KEY", "timecardRecords")

DB_CONFIG = db_config_from_env()

EMPLOYEES = employees_from_env()
