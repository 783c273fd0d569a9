# schemas/reference.py
from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=255),
]

CodeStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

OptStr100 = (
    Annotated[
        str,
        StringConstraints(strip_whitespace=True, max_length=100),
    ]
    | None
)

OptText = str | None


class ReferenceRecord(BaseModel):
    """
    One hand-authored row of reference data.

    - Unknown keys in the JSON files are rejected so typos surface early.
    - to_row() gives the column -> value mapping used for INSERT.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_row(self) -> dict[str, Any]:
        return self.model_dump()


class MedicineRecord(ReferenceRecord):
    name: NameStr
    medicine_code: CodeStr
    form: OptStr100 = "tablet"  # tablet / capsule / injection / syrup / ...
    strength: OptStr100 = None
    default_frequency: OptStr100 = None
    duration: OptStr100 = None
    route: OptStr100 = None


class ProcedureRecord(ReferenceRecord):
    name: NameStr
    procedure_code: CodeStr
    department: OptStr100 = None
    category: OptStr100 = None
    duration: OptStr100 = None
    description: OptText = None
    preparation_instructions: OptText = None


class LabTestRecord(ReferenceRecord):
    name: NameStr
    test_code: CodeStr
    category: OptStr100 = None
    sample_type: OptStr100 = None
    turnaround_time: OptStr100 = None
    preparation_instructions: OptText = None


class DoctorRecord(ReferenceRecord):
    name: NameStr
    email: NameStr
    phone: OptStr100 = None
    specialization: OptStr100 = None
    consultation_fee: int = Field(ge=0)  # rupees


class PatientRecord(ReferenceRecord):
    full_name: NameStr
    email: NameStr
    phone: OptStr100 = None
    concern: OptText = None
    age: int | None = Field(default=None, ge=0, le=150)
    gender: OptStr100 = None
    state: OptStr100 = None
    address: OptText = None

    def to_row(self) -> dict[str, Any]:
        row = self.model_dump(exclude={"concern"})
        # The presenting concern is stored as free-text notes.
        row["notes"] = self.concern
        return row
