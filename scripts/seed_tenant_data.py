#!/usr/bin/env python3
# scripts/seed_tenant_data.py
"""
Tenant data seeder.

Seeds demo doctors and patients into one tenant schema. Each new patient
gets a random demo doctor; patients without a PT-YYYY-NNNNNN uid get one.
Safe to run many times (rows are matched by email and skipped).

Run:
  python -m scripts.seed_tenant_data <SCHEMA_NAME>
  python -m scripts.seed_tenant_data hosp_raj_dulai_hospital

Connection settings come from DB_HOST / DB_PORT / DB_USER / DB_PASSWORD
(or .env).
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow "python -m scripts.seed_tenant_data" from repo root
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from tenant_seed.core.config import get_settings  # noqa: E402
from tenant_seed.core.database import create_tenant_engine, log_db_error, tenant_connection  # noqa: E402
from tenant_seed.services.tenant_seed_service import seed_tenant_data  # noqa: E402

EXAMPLE = "python -m scripts.seed_tenant_data hosp_raj_dulai_hospital"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="seed_tenant_data",
        description="Seed demo doctors and patients into a tenant schema",
    )
    parser.add_argument("schema_name", nargs="?", metavar="SCHEMA_NAME", help="Tenant schema (database) name")
    args = parser.parse_args(argv)

    if not args.schema_name:
        parser.print_usage(sys.stderr)
        print(f"Example: {EXAMPLE}", file=sys.stderr)
        raise SystemExit(1)

    logging.basicConfig(level=get_settings().log_level)

    schema = args.schema_name
    print(f"\nSeeding data into schema: {schema}\n")

    try:
        engine = create_tenant_engine(schema)
        with tenant_connection(engine) as conn:
            summary = seed_tenant_data(conn, schema)
    except Exception as e:
        log_db_error(e)
        print(f"Seeding error: {e}", file=sys.stderr)
        raise SystemExit(1)

    print("\nSeeding complete!")
    for line in summary.lines():
        print(f"   {line}")


if __name__ == "__main__":
    main()
