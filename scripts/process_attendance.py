"""Run the attendance reconciliation job once, outside Flask.

Usage: python scripts/process_attendance.py [--start YYYY-MM-DD --end YYYY-MM-DD]
Without both dates the trailing 31-day window is processed.
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hrms_attendance.hrms_attendance.container import build_container
from src.hrms_attendance.hrms_attendance.core.logger import setup_logger


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reconcile device swipes and approved leave into attendance_status.")
    parser.add_argument("--start", dest="start_date", default=None, help="first day, YYYY-MM-DD")
    parser.add_argument("--end", dest="end_date", default=None, help="last day, YYYY-MM-DD")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logger(getattr(settings, "LOG_LEVEL", "INFO"), log_file=getattr(settings, "LOG_FILE", None))

    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        timezone=settings.ATTENDANCE_TIMEZONE,
        half_day_hours=settings.HALF_DAY_HOURS,
    )
    summary = container.reconciliation_service.process(args.start_date, args.end_date)
    print(json.dumps(summary.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
