# tenant_seed/services/reference_data.py
"""
Loaders for the bundled reference data sets.

The JSON files ship inside the package (tenant_seed/data). Setting
SEED_DATA_DIR points the loaders at another directory with the same
file names, e.g. to seed a different demo dataset.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import TypeAdapter

from tenant_seed.core.config import get_settings
from tenant_seed.schemas.reference import (
    DoctorRecord,
    LabTestRecord,
    MedicineRecord,
    PatientRecord,
    ProcedureRecord,
    ReferenceRecord,
)

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

R = TypeVar("R", bound=ReferenceRecord)


def data_dir() -> Path:
    override = get_settings().seed_data_dir
    return Path(override) if override else PACKAGE_DATA_DIR


def load_json(name: str) -> Any:
    path = data_dir() / name
    return json.loads(path.read_text(encoding="utf-8"))


def _load(name: str, model: type[R]) -> list[R]:
    return TypeAdapter(list[model]).validate_python(load_json(name))


def load_medicines() -> list[MedicineRecord]:
    return _load("medicines.json", MedicineRecord)


def load_procedures() -> list[ProcedureRecord]:
    return _load("procedures.json", ProcedureRecord)


def load_lab_tests() -> list[LabTestRecord]:
    return _load("lab_tests.json", LabTestRecord)


def load_doctors() -> list[DoctorRecord]:
    return _load("doctors.json", DoctorRecord)


def load_patients() -> list[PatientRecord]:
    return _load("patients.json", PatientRecord)
