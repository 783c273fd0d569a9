import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool

from tenant_seed.core.config import get_settings

logger = logging.getLogger(__name__)


def create_tenant_engine(schema_name: str) -> Engine:
    """
    Engine bound to a single tenant schema.

    The pool is small and bounded; a seeding run only ever checks out
    one connection from it.
    """
    settings = get_settings()
    return create_engine(
        settings.database_url(schema_name),
        future=True,
        pool_pre_ping=True,
        poolclass=QueuePool,
        pool_size=settings.db_pool_size,
        max_overflow=0,
    )


@contextmanager
def tenant_connection(engine: Engine) -> Generator[Connection, None, None]:
    """
    Check out one connection for the whole run.

    AUTOCOMMIT: every INSERT/UPDATE/ALTER commits on its own, so an aborted
    run keeps whatever it already wrote (re-runs skip those rows).
    The connection is released and the pool closed even on error.
    """
    try:
        conn = engine.connect().execution_options(isolation_level="AUTOCOMMIT")
        try:
            yield conn
        finally:
            conn.close()
    finally:
        engine.dispose()


def log_db_error(e: Exception) -> None:
    """
    Emit the underlying DB error, including the DBAPI exception when there is one.
    """
    logger.error("Seed failed: %s", e, exc_info=True)
    if isinstance(e, SQLAlchemyError) and getattr(e, "orig", None) is not None:
        logger.error("DBAPI orig: %r", e.orig)
