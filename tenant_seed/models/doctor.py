# tenant_seed/models/doctor.py
from tenant_seed.models.base import TableSpec

# platform_doctor_id only exists on schemas migrated for the wider platform.
# It is detected, never added.
DOCTORS = TableSpec(name="doctors", natural_key="email")
