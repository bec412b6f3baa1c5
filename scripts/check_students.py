#!/usr/bin/env python3
"""
Run the students listing query once from the command line.

Usage:
    python scripts/check_students.py [--limit 10] [--mock]

Reads SUPABASE_URL / SUPABASE_KEY (or .env) like the app does.
Exits 1 when the query fails.
"""

from __future__ import annotations

import argparse
import os
import sys

APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "app"))
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from components.student_table import student_rows  # noqa: E402
from config import configure_locale, configure_logging, get_config  # noqa: E402
from data.connection import BackendConfigError, get_supabase_client  # noqa: E402
from data.mock_data import MockStudentClient  # noqa: E402
from data.queries import MAX_ROWS, q_recent_students  # noqa: E402
from data.service import fetch_records  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    ap.add_argument("--limit", type=int, default=MAX_ROWS, help="Rows to request (max %d)" % MAX_ROWS)
    ap.add_argument("--mock", action="store_true", help="Use generated demo data instead of Supabase")
    ap.add_argument("--show", type=int, default=5, help="Rows to print")
    args = ap.parse_args(argv)

    cfg = get_config()
    configure_logging(cfg.log_level)
    configure_locale()

    if args.mock or cfg.use_mock:
        client = MockStudentClient(n_rows=cfg.mock_student_count)
    else:
        try:
            client = get_supabase_client(cfg)
        except BackendConfigError as e:
            print(f"ERROR: {e}")
            return 1

    limit = max(1, min(args.limit, MAX_ROWS))
    state = fetch_records(client, q_recent_students(limit))
    if state.status == "error":
        print(f"ERROR: {state.error}")
        return 1

    print(f"OK: {len(state.records)} student record(s)")
    for row in student_rows(state.records[: max(0, args.show)]):
        print("  " + " | ".join(row.values()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
