# tenant_seed/utils/id_generators.py
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Connection, or_, select, update

from tenant_seed.models.patient import PATIENTS

PATIENT_UID_PREFIX = "PT"


def generate_patient_uid(patient_id: int, year: int | None = None) -> str:
    """
    Generate a patient UID in format: PT-{year}-{id}

    Where:
    - {year} = calendar year at generation time (not a patient attribute)
    - {id} = the row's primary key, zero-padded to 6 digits

    Example: PT-2025-000042
    """
    if year is None:
        year = datetime.now().year
    return f"{PATIENT_UID_PREFIX}-{year}-{patient_id:06d}"


def assign_patient_uid(conn: Connection, patient_id: int) -> str:
    """
    Set patient_uid on a freshly inserted row (the id is only known after INSERT).
    """
    uid = generate_patient_uid(patient_id)
    t = PATIENTS.sql_table(["patient_uid"])
    conn.execute(update(t).where(t.c.id == patient_id).values(patient_uid=uid))
    return uid


def backfill_patient_uids(conn: Connection) -> int:
    """
    Give a UID to every patient that has none (NULL or empty), lowest id first.

    Rows that already carry a UID are never touched. Returns the number of
    rows updated.
    """
    t = PATIENTS.sql_table(["patient_uid"])
    missing = conn.execute(
        select(t.c.id)
        .where(or_(t.c.patient_uid.is_(None), t.c.patient_uid == ""))
        .order_by(t.c.id.asc())
    ).scalars().all()

    for patient_id in missing:
        assign_patient_uid(conn, patient_id)
    return len(missing)
