#!/usr/bin/env python3
"""
Seed the configured key-value store with the demo data served by GET /init.

Only missing keys are written, so the script is safe to run repeatedly.

Usage:
    cd backend
    PYTHONPATH=. python3 scripts/seed_store.py
    PYTHONPATH=. python3 scripts/seed_store.py --dry-run   # list keys that would be written
"""

import argparse
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

# Ensure backend/ is on the path so app.* imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import get_settings  # noqa: E402
from app.db.kv_store import create_kv_store  # noqa: E402
from app.services.bootstrap_service import seed_records, bootstrap  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed demo data into the key-value store")
    parser.add_argument("--dry-run", action="store_true", help="Show missing keys without writing")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = get_settings()
    store = create_kv_store(settings)

    try:
        if args.dry_run:
            missing = [key for key, _ in seed_records(datetime.now(UTC)) if store.get(key) is None]
            print(f"{len(missing)} keys would be written:")
            for key in missing:
                print(f"  {key}")
            return 0

        report = bootstrap(store)
        print(report.message)
        for key in report.failed:
            print(f"  FAILED: {key}")
        return 1 if report.failed else 0
    finally:
        store.close()


if __name__ == "__main__":
    sys.exit(main())
