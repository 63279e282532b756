#!/usr/bin/env python3
"""
Seed reference data into the local database.

Usage:
    python seed_data.py              # Seed regions, offices, operator and politicians
    python seed_data.py --reference  # Seed regions, offices and operator only
    python seed_data.py --validate   # Check seeded data integrity
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import duckdb

from app.models.reference import OperatorAccount
from app.repositories import db_exists, get_write_connection
from etl import SeedError, seed_all, validate_seed
from settings import ADMIN_EMAIL, ADMIN_FIRST_NAME, ADMIN_LAST_NAME, ADMIN_PASSWORD, DB_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=True)


def run_validation(conn: duckdb.DuckDBPyConnection | None = None) -> bool:
    """Validate seeded data."""
    own_conn = conn is None
    if own_conn:
        if not db_exists():
            print("\n⚠️  No database found. Run 'python seed_data.py' first.\n")
            return True
        conn = duckdb.connect(DB_PATH, read_only=True)

    result = validate_seed(conn)

    print("\n" + "=" * 60)
    print("SEED VALIDATION REPORT")
    print("=" * 60)
    print(f"  Regions: {result['stats']['region']:,}")
    print(f"  Offices: {result['stats']['office']:,}")
    print(f"  Accounts: {result['stats']['account']:,}")
    print(f"  Politicians: {result['stats']['politician']:,}")
    print(f"  Tenures: {result['stats']['tenure']:,}")
    print(f"  Rankings: {result['stats']['ranking']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    if result["valid"]:
        print("✅ All data valid!")
    else:
        print("❌ Some issues found. Run seed again to fix.")
    print("=" * 60 + "\n")

    if own_conn:
        conn.close()
    return result["valid"]


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        if not run_validation():
            sys.exit(1)
        return

    unknown = [a for a in args if a != "--reference"]
    if unknown:
        print(__doc__)
        sys.exit(1)

    with_politicians = "--reference" not in args
    operator = OperatorAccount(
        email=ADMIN_EMAIL,
        password=ADMIN_PASSWORD,
        first_name=ADMIN_FIRST_NAME,
        last_name=ADMIN_LAST_NAME,
    )

    try:
        conn = get_write_connection()
    except duckdb.Error as e:
        logger.error("Cannot open database {}: {}", DB_PATH, e)
        sys.exit(1)

    try:
        seed_all(conn, operator, with_politicians=with_politicians)
    except SeedError as e:
        logger.error("Seed failed: {}", e.message)
        conn.close()
        sys.exit(1)
    except duckdb.Error as e:
        logger.error("Seed failed: {}", e)
        conn.close()
        sys.exit(1)

    logger.info("Running validation...")
    run_validation(conn)
    conn.close()


if __name__ == "__main__":
    main()
