"""Small query helpers shared across test modules."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Connection, MetaData, Table, func, select


def fetch_rows(conn: Connection, table_name: str) -> list[dict[str, Any]]:
    """All rows of a table as dicts, ordered by id."""
    t = Table(table_name, MetaData(), autoload_with=conn)
    return [dict(r._mapping) for r in conn.execute(select(t).order_by(t.c.id))]


def count_rows(conn: Connection, table_name: str) -> int:
    t = Table(table_name, MetaData(), autoload_with=conn)
    return conn.execute(select(func.count()).select_from(t)).scalar_one()
