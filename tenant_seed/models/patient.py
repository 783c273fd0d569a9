# tenant_seed/models/patient.py
from tenant_seed.models.base import TableSpec

PATIENT_UID_INDEX = "unique_patient_uid"

PATIENTS = TableSpec(
    name="patients",
    natural_key="email",
    optional_columns=(
        ("age", "INT DEFAULT NULL"),
        ("gender", "VARCHAR(10) DEFAULT NULL"),
        ("state", "VARCHAR(100) DEFAULT NULL"),
        ("address", "TEXT DEFAULT NULL"),
        ("patient_uid", "VARCHAR(20) DEFAULT NULL"),
        ("notes", "TEXT DEFAULT NULL"),
        ("doctor_id", "INT DEFAULT NULL"),
        ("is_active", "TINYINT(1) DEFAULT 1"),
    ),
)
