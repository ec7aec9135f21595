import os

from ._common import db_config_from_env, employees_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "file" keeps the record blob under DATA_DIR; "mysql" uses the kv_store table.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")
STORAGE_KEY = os.getenv("STORAGE_KEY", "timecardRecords")

DB_CONFIG = db_config_from_env()

EMPLOYEES = employees_from_env()
