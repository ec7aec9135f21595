import os

from timecard.employees.roster import parse_roster

DEFAULT_EMPLOYEES = {"e1": "三島理絵"}


def employees_from_env() -> dict:
    return parse_roster(os.getenv("TIMECARD_EMPLOYEES", "")) or dict(DEFAULT_EMPLOYEES)


def db_config_from_env(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "timecard_db"),
    }
