"""Example: use the service layer without Flask.

Prints the monthly summary of the configured store for a given month.
"""

import importlib
import sys
from datetime import date

from config import get_settings_module
from timecard.common.timeutils import format_minutes
from timecard.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        employees=settings.EMPLOYEES,
        storage_backend=settings.STORAGE_BACKEND,
        data_dir=settings.DATA_DIR,
        db_config=settings.DB_CONFIG,
        storage_key=settings.STORAGE_KEY,
    )

    month = sys.argv[1] if len(sys.argv) > 1 else date.today().strftime("%Y-%m")
    for row in container.query_service.get_monthly_summary(month, "all"):
        worked = format_minutes(row.work_minutes) if row.has_work_minutes else "-"
        print(row.date, row.employee_name, row.start, row.end, worked)

    totals = container.query_service.get_monthly_totals(month, "all")
    print(f"{totals.days} days, worked {format_minutes(totals.work_minutes)}")


if __name__ == "__main__":
    main()
