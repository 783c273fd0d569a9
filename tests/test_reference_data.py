"""Tests for the bundled reference data and its loaders."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from tenant_seed.schemas.reference import MedicineRecord, PatientRecord
from tenant_seed.services.reference_data import (
    PACKAGE_DATA_DIR,
    data_dir,
    load_doctors,
    load_lab_tests,
    load_medicines,
    load_patients,
    load_procedures,
)


@pytest.mark.parametrize(
    ("loader", "expected", "key"),
    [
        (load_medicines, 100, "name"),
        (load_procedures, 50, "name"),
        (load_lab_tests, 60, "name"),
        (load_doctors, 38, "email"),
        (load_patients, 200, "email"),
    ],
)
def test_bundled_sets_have_unique_natural_keys(loader, expected, key):
    records = loader()
    assert len(records) == expected
    assert len({getattr(r, key) for r in records}) == expected


def test_first_doctor():
    amit = load_doctors()[0]
    assert amit.name == "Dr. Amit Sharma"
    assert amit.email == "amit.sharma@hospitaltest.com"
    assert amit.consultation_fee == 500


def test_patient_concern_is_stored_as_notes():
    p = PatientRecord(full_name="Aarav Sharma", email="a@x.com", concern="Fever and headache", age=25)
    row = p.to_row()
    assert row["notes"] == "Fever and headache"
    assert "concern" not in row
    assert row["age"] == 25


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        MedicineRecord(name="Paracetamol", medicine_code="MED001", colour="white")


class TestDataDirOverride:
    def test_default_is_packaged(self, monkeypatch):
        monkeypatch.delenv("SEED_DATA_DIR", raising=False)
        assert data_dir() == PACKAGE_DATA_DIR

    def test_override(self, monkeypatch, tmp_path):
        (tmp_path / "medicines.json").write_text(
            json.dumps([{"name": "Zinc", "medicine_code": "Z1", "form": "tablet"}]),
            encoding="utf-8",
        )
        monkeypatch.setenv("SEED_DATA_DIR", str(tmp_path))
        meds = load_medicines()
        assert [m.name for m in meds] == ["Zinc"]

    def test_malformed_file_raises(self, monkeypatch, tmp_path):
        (tmp_path / "doctors.json").write_text(
            json.dumps([{"name": "Dr. X", "email": "x@y.com", "consultation_fee": -5}]),
            encoding="utf-8",
        )
        monkeypatch.setenv("SEED_DATA_DIR", str(tmp_path))
        with pytest.raises(ValidationError):
            load_doctors()
