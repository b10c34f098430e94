#!/usr/bin/env python3
"""
Export all saved scenarios to a JSON file.

Usage:
    python scripts/export_scenarios.py [PATH]

PATH defaults to SCENARIO_EXPORT_PATH (from .env.development or
.env.production).
"""

import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse

from fintrack.config import get_settings
from fintrack.db.database import get_db_context, init_db
from fintrack.services.scenario_files import export_scenarios


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Export saved scenarios to JSON")
    parser.add_argument(
        "path", nargs="?", default=settings.scenario_export_path, help="Output file"
    )
    args = parser.parse_args(argv)

    init_db()

    with get_db_context() as db:
        count = export_scenarios(db, args.path)

    print(f"Exported {count} scenarios to {args.path}")


if __name__ == "__main__":
    main()
