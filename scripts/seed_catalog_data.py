#!/usr/bin/env python3
# scripts/seed_catalog_data.py
"""
Catalog data seeder.

Seeds medicines, procedures and lab tests into one tenant schema.
Safe to run many times (rows are matched by name and skipped).

Run:
  python -m scripts.seed_catalog_data <SCHEMA_NAME>
  python -m scripts.seed_catalog_data hosp_raj_dulai_hospital

Connection settings come from DB_HOST / DB_PORT / DB_USER / DB_PASSWORD
(or .env).
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow "python -m scripts.seed_catalog_data" from repo root
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from tenant_seed.core.config import get_settings  # noqa: E402
from tenant_seed.core.database import create_tenant_engine, log_db_error, tenant_connection  # noqa: E402
from tenant_seed.services.catalog_seed_service import seed_catalog  # noqa: E402

EXAMPLE = "python -m scripts.seed_catalog_data hosp_raj_dulai_hospital"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="seed_catalog_data",
        description="Seed medicines / procedures / lab tests into a tenant schema",
    )
    parser.add_argument("schema_name", nargs="?", metavar="SCHEMA_NAME", help="Tenant schema (database) name")
    args = parser.parse_args(argv)

    if not args.schema_name:
        parser.print_usage(sys.stderr)
        print(f"Example: {EXAMPLE}", file=sys.stderr)
        raise SystemExit(1)

    logging.basicConfig(level=get_settings().log_level)

    schema = args.schema_name
    print(f"\nSeeding catalog data into schema: {schema}\n")

    try:
        engine = create_tenant_engine(schema)
        with tenant_connection(engine) as conn:
            summary = seed_catalog(conn, schema)
    except Exception as e:
        log_db_error(e)
        print(f"Seeding error: {e}", file=sys.stderr)
        raise SystemExit(1)

    print("\nCatalog seeding complete!")
    for line in summary.lines():
        print(f"   {line}")


if __name__ == "__main__":
    main()
