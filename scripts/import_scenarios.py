#!/usr/bin/env python3
"""
Import scenarios from a JSON file written by export_scenarios.py.

Usage:
    python scripts/import_scenarios.py [PATH] [--replace]

Scenarios whose name already exists are skipped unless --replace is given.
"""

import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse

from fintrack.config import get_settings
from fintrack.db.database import get_db_context, init_db
from fintrack.services.scenario_files import ScenarioFileError, import_scenarios


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Import scenarios from JSON")
    parser.add_argument(
        "path", nargs="?", default=settings.scenario_export_path, help="Input file"
    )
    parser.add_argument(
        "--replace", action="store_true", help="Overwrite scenarios with the same name"
    )
    args = parser.parse_args(argv)

    init_db()

    try:
        with get_db_context() as db:
            counts = import_scenarios(db, args.path, replace=args.replace)
    except ScenarioFileError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(
        f"Created {counts['created']}, replaced {counts['replaced']}, "
        f"skipped {counts['skipped']}"
    )


if __name__ == "__main__":
    main()
