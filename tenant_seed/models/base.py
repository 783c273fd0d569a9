# tenant_seed/models/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from sqlalchemy import column, table
from sqlalchemy.sql.expression import TableClause

from tenant_seed.core.tenant_db import ColumnDefinition


@dataclass(frozen=True)
class TableSpec:
    """
    Descriptor for a tenant table the seeder writes to.

    NOTE:
    - Tables are owned by the tenant schema; the seeder never creates them.
    - optional_columns are the ones later migrations added. They are
      reconciled (best-effort) before seeding and only written when present.
    """

    name: str
    natural_key: str
    optional_columns: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    def column_definitions(self) -> list[ColumnDefinition]:
        return [ColumnDefinition(self.name, col, ddl) for col, ddl in self.optional_columns]

    def sql_table(self, columns: Iterable[str] = ()) -> TableClause:
        """
        Lightweight Core table with `id`, the natural key and `columns`.
        """
        names = ["id", self.natural_key]
        names.extend(c for c in columns if c not in names)
        return table(self.name, *(column(n) for n in names))
