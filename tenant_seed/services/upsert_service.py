# tenant_seed/services/upsert_service.py
"""
Insert-if-missing over a reference data set.

Rows are matched by the table's natural key (exact match). Only columns
that exist in the tenant schema end up in the INSERT, so older schemas
that never got an optional column still seed cleanly.

Records are handled strictly one after another: the lookup for record N+1
must see the row inserted for record N.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from sqlalchemy import Connection, insert, select

from tenant_seed.models.base import TableSpec
from tenant_seed.schemas.reference import ReferenceRecord
from tenant_seed.services.summary import SeedCounts

logger = logging.getLogger(__name__)

RowCallback = Callable[[int], None]
ExtraValues = Callable[[ReferenceRecord], Mapping[str, Any]]


def find_existing_id(conn: Connection, spec: TableSpec, key_value: Any) -> int | None:
    t = spec.sql_table()
    key_col = t.c[spec.natural_key]
    return conn.execute(select(t.c.id).where(key_col == key_value).limit(1)).scalar()


def insert_row(
    conn: Connection,
    spec: TableSpec,
    row: Mapping[str, Any],
    present_columns: set[str],
) -> int:
    """
    INSERT `row` restricted to `present_columns`; returns the new id.
    """
    values = {k: v for k, v in row.items() if k in present_columns}
    dropped = sorted(set(row) - set(values))
    if dropped:
        logger.debug("%s: omitting absent columns %s", spec.name, dropped)

    t = spec.sql_table(values.keys())
    result = conn.execute(insert(t).values(**values))
    return result.lastrowid


def upsert_records(
    conn: Connection,
    spec: TableSpec,
    records: Iterable[ReferenceRecord],
    present_columns: set[str],
    counts: SeedCounts,
    *,
    extra_values: ExtraValues | None = None,
    on_existing: RowCallback | None = None,
    on_inserted: RowCallback | None = None,
) -> SeedCounts:
    """
    For each record: skip it when a row with the same natural key exists,
    insert it otherwise.

    - extra_values(record) adds per-row values that are not part of the
      reference data (doctor_id, created_at, ...).
    - on_existing / on_inserted receive the matched or new row id.

    Insert failures are not caught: rows written so far stay, and a re-run
    skips them.
    """
    for record in records:
        row = record.to_row()
        existing_id = find_existing_id(conn, spec, row[spec.natural_key])
        if existing_id is not None:
            counts.skipped += 1
            if on_existing:
                on_existing(existing_id)
            continue

        if extra_values:
            row.update(extra_values(record))

        new_id = insert_row(conn, spec, row, present_columns)
        counts.inserted += 1
        if on_inserted:
            on_inserted(new_id)

    return counts
