# tenant_seed/services/tenant_seed_service.py
"""
Demo doctors and patients for one tenant schema.

Order matters:
1. optional patient columns + unique key on patient_uid
2. doctors (their ids feed the patient -> doctor assignment)
3. patients, each getting a UID right after INSERT
4. UID backfill for patients created before UIDs existed
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import Connection

from tenant_seed.core.tenant_db import ensure_columns, ensure_unique_index, table_columns
from tenant_seed.models import DOCTORS, PATIENT_UID_INDEX, PATIENTS
from tenant_seed.schemas.reference import DoctorRecord, PatientRecord, ReferenceRecord
from tenant_seed.services.reference_data import load_doctors, load_patients
from tenant_seed.services.summary import RunSummary, SeedCounts
from tenant_seed.services.upsert_service import upsert_records
from tenant_seed.utils.id_generators import assign_patient_uid, backfill_patient_uids

logger = logging.getLogger(__name__)


def ensure_patient_columns(conn: Connection) -> None:
    ensure_columns(conn, PATIENTS.column_definitions())
    ensure_unique_index(conn, PATIENTS.name, PATIENT_UID_INDEX, "patient_uid")


def has_patient_uid(conn: Connection) -> bool:
    return "patient_uid" in table_columns(conn, PATIENTS.name)


def seed_doctors(
    conn: Connection,
    doctors: Sequence[DoctorRecord],
    counts: SeedCounts,
) -> list[int]:
    """
    Insert missing demo doctors. Returns the ids of all demo doctors,
    existing and new, in data order.
    """
    doctor_ids: list[int] = []
    present = table_columns(conn, DOCTORS.name)

    def extra(_: ReferenceRecord) -> dict[str, Any]:
        values: dict[str, Any] = {"is_active": 1, "created_at": datetime.now()}
        if "platform_doctor_id" in present:
            values["platform_doctor_id"] = 0
        return values

    upsert_records(
        conn,
        DOCTORS,
        doctors,
        present,
        counts,
        extra_values=extra,
        on_existing=doctor_ids.append,
        on_inserted=doctor_ids.append,
    )
    return doctor_ids


def seed_patients(
    conn: Connection,
    patients: Sequence[PatientRecord],
    counts: SeedCounts,
    doctor_ids: Sequence[int],
    rng: random.Random,
) -> None:
    present = table_columns(conn, PATIENTS.name)
    with_uid = "patient_uid" in present

    def extra(_: ReferenceRecord) -> dict[str, Any]:
        # Demo data only: any doctor will do.
        return {
            "doctor_id": rng.choice(doctor_ids) if doctor_ids else None,
            "is_active": 1,
            "created_at": datetime.now(),
        }

    def on_inserted(patient_id: int) -> None:
        if with_uid:
            assign_patient_uid(conn, patient_id)

    upsert_records(
        conn,
        PATIENTS,
        patients,
        present,
        counts,
        extra_values=extra,
        on_inserted=on_inserted,
    )


def seed_tenant_data(
    conn: Connection,
    schema_name: str,
    rng: random.Random | None = None,
) -> RunSummary:
    """
    Seed demo doctors and patients into the schema `conn` is bound to.
    """
    rng = rng or random.Random()
    summary = RunSummary(schema_name=schema_name)

    # Validate both data files before the first write.
    doctors = load_doctors()
    patients = load_patients()

    try:
        print("Step 1: Ensuring required columns exist...")
        ensure_patient_columns(conn)

        print("\nStep 2: Seeding doctors...")
        doctor_counts = summary.category("Doctors")
        doctor_ids = seed_doctors(conn, doctors, doctor_counts)
        print(
            f"  Doctors: {doctor_counts.inserted} inserted, "
            f"{doctor_counts.skipped} skipped (already exist)"
        )

        print("\nStep 3: Seeding patients...")
        patient_counts = summary.category("Patients")
        seed_patients(conn, patients, patient_counts, doctor_ids, rng)
        print(
            f"  Patients: {patient_counts.inserted} inserted, "
            f"{patient_counts.skipped} skipped (already exist)"
        )

        print("\nStep 4: Backfilling UIDs for existing patients...")
        if has_patient_uid(conn):
            summary.backfilled = backfill_patient_uids(conn)
            print(f"  Backfilled UIDs for {summary.backfilled} existing patients")
        else:
            logger.warning("patients.patient_uid is missing in schema=%s; UIDs not generated", schema_name)
    except Exception:
        logger.error("Tenant data seeding failed for schema=%s", schema_name)
        raise

    return summary
