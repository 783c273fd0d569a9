# tenant_seed/models/catalog.py
from tenant_seed.models.base import TableSpec

MEDICINES_CATALOG = TableSpec(
    name="medicines_catalog",
    natural_key="name",
    optional_columns=(
        ("medicine_code", "VARCHAR(100) AFTER name"),
        ("form", "VARCHAR(50) DEFAULT 'tablet'"),
        ("strength", "VARCHAR(50)"),
        ("default_frequency", "VARCHAR(100)"),
        ("duration", "VARCHAR(50)"),
        ("route", "VARCHAR(50)"),
    ),
)

# Catalogue spelling matches the tenant schema.
PROCEDURE_CATALOGUE = TableSpec(
    name="procedure_catalogue",
    natural_key="name",
    optional_columns=(
        ("procedure_code", "VARCHAR(100) AFTER name"),
        ("department", "VARCHAR(100) AFTER procedure_code"),
        ("duration", "VARCHAR(50)"),
    ),
)

LAB_CATALOGUE = TableSpec(
    name="lab_catalogue",
    natural_key="name",
    optional_columns=(("test_code", "VARCHAR(100) AFTER name"),),
)
