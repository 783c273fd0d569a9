# tenant_seed/core/tenant_db.py
"""
Schema helpers for tenant databases.

- Column probing goes through information_schema with bound parameters.
- DDL here is advisory: older tenant schemas get the optional columns added
  when we are allowed to, and callers re-check what actually exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from sqlalchemy import Connection, inspect, text
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnDefinition:
    table: str
    column: str
    definition: str  # SQL type + default, e.g. "VARCHAR(50) DEFAULT 'tablet'"

    def add_column_sql(self) -> str:
        return f"ALTER TABLE {self.table} ADD COLUMN {self.column} {self.definition}"


def _is_mysql(conn: Connection) -> bool:
    return conn.dialect.name == "mysql"


def column_exists(conn: Connection, table: str, column: str) -> bool:
    if not _is_mysql(conn):
        return column in table_columns(conn, table)

    q = text(
        """
        SELECT 1
        FROM information_schema.COLUMNS
        WHERE TABLE_SCHEMA = DATABASE()
          AND TABLE_NAME = :table
          AND COLUMN_NAME = :column
        LIMIT 1
        """
    )
    return conn.execute(q, {"table": table, "column": column}).first() is not None


def table_columns(conn: Connection, table: str) -> set[str]:
    """
    Names of the columns currently present on `table`.
    """
    if not _is_mysql(conn):
        return {c["name"] for c in inspect(conn).get_columns(table)}

    q = text(
        """
        SELECT COLUMN_NAME
        FROM information_schema.COLUMNS
        WHERE TABLE_SCHEMA = DATABASE()
          AND TABLE_NAME = :table
        """
    )
    return {row[0] for row in conn.execute(q, {"table": table})}


def best_effort(conn: Connection, statement: str) -> bool:
    """
    Run a DDL statement, mapping any database failure to a no-op.

    Returns True if the statement went through. A False result means the
    change may or may not be in place (already present, no ALTER privilege,
    ...); callers must re-check the schema instead of trusting it.
    """
    try:
        conn.execute(text(statement))
    except SQLAlchemyError as e:
        logger.warning("Skipped DDL (%s): %s", statement, getattr(e, "orig", None) or e)
        return False
    return True


def ensure_columns(conn: Connection, definitions: Iterable[ColumnDefinition]) -> list[ColumnDefinition]:
    """
    Add every column that is missing. Returns the definitions actually added.

    A failed existence check for one column skips that column only.
    """
    added: list[ColumnDefinition] = []
    for d in definitions:
        try:
            present = column_exists(conn, d.table, d.column)
        except SQLAlchemyError as e:
            logger.warning("Could not check %s.%s, skipping: %s", d.table, d.column, e)
            continue

        if present:
            continue

        if best_effort(conn, d.add_column_sql()):
            print(f"  Added column {d.table}.{d.column}")
            added.append(d)
    return added


def index_exists(conn: Connection, table: str, index_name: str) -> bool:
    if not _is_mysql(conn):
        return any(ix["name"] == index_name for ix in inspect(conn).get_indexes(table))

    q = text(
        """
        SELECT 1
        FROM information_schema.STATISTICS
        WHERE TABLE_SCHEMA = DATABASE()
          AND TABLE_NAME = :table
          AND INDEX_NAME = :index
        LIMIT 1
        """
    )
    return conn.execute(q, {"table": table, "index": index_name}).first() is not None


def ensure_unique_index(conn: Connection, table: str, index_name: str, column: str) -> bool:
    """
    Add the unique key unless an index with that name is already there.

    Returns True when the key is in place (found or added).
    """
    try:
        if index_exists(conn, table, index_name):
            return True
    except SQLAlchemyError as e:
        logger.warning("Could not check index %s.%s, skipping: %s", table, index_name, e)
        return False

    return best_effort(conn, f"ALTER TABLE {table} ADD UNIQUE KEY {index_name} ({column})")
