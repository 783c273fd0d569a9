# tenant_seed/services/catalog_seed_service.py
"""
Medicines / procedures / lab tests catalogs for one tenant schema.

Idempotent: catalog rows are matched by name and never updated.
"""

from __future__ import annotations

import logging

from sqlalchemy import Connection

from tenant_seed.core.tenant_db import ensure_columns, table_columns
from tenant_seed.models import LAB_CATALOGUE, MEDICINES_CATALOG, PROCEDURE_CATALOGUE
from tenant_seed.services.reference_data import load_lab_tests, load_medicines, load_procedures
from tenant_seed.services.summary import RunSummary
from tenant_seed.services.upsert_service import upsert_records

logger = logging.getLogger(__name__)

CATALOG_TABLES = (MEDICINES_CATALOG, PROCEDURE_CATALOGUE, LAB_CATALOGUE)


def ensure_catalog_columns(conn: Connection) -> None:
    for spec in CATALOG_TABLES:
        ensure_columns(conn, spec.column_definitions())


def seed_catalog(conn: Connection, schema_name: str) -> RunSummary:
    """
    Seed all three catalogs into the schema `conn` is bound to.
    """
    summary = RunSummary(schema_name=schema_name)

    # Validate all data files before the first write.
    medicines = load_medicines()
    procedures = load_procedures()
    lab_tests = load_lab_tests()

    try:
        print("Step 1: Ensuring catalog columns exist...")
        ensure_catalog_columns(conn)

        steps = (
            ("Medicines", MEDICINES_CATALOG, medicines),
            ("Procedures", PROCEDURE_CATALOGUE, procedures),
            ("Lab Tests", LAB_CATALOGUE, lab_tests),
        )
        for n, (label, spec, records) in enumerate(steps, start=2):
            print(f"\nStep {n}: Seeding {spec.name}...")
            present = table_columns(conn, spec.name)
            counts = upsert_records(conn, spec, records, present, summary.category(label))
            print(f"  {label}: {counts.inserted} inserted, {counts.skipped} skipped")
    except Exception:
        logger.error("Catalog seeding failed for schema=%s", schema_name)
        raise

    return summary
