from tenant_seed.models.base import TableSpec
from tenant_seed.models.catalog import LAB_CATALOGUE, MEDICINES_CATALOG, PROCEDURE_CATALOGUE
from tenant_seed.models.doctor import DOCTORS
from tenant_seed.models.patient import PATIENT_UID_INDEX, PATIENTS

__all__ = [
    "TableSpec",
    "MEDICINES_CATALOG",
    "PROCEDURE_CATALOGUE",
    "LAB_CATALOGUE",
    "DOCTORS",
    "PATIENTS",
    "PATIENT_UID_INDEX",
]
