"""Shared test fixtures.

Tenant tables are created in an in-memory SQLite database with the
pre-migration layout: only the columns every tenant schema has had from
the start. The seeders add the optional ones themselves.
"""

from __future__ import annotations

import pytest
from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.pool import StaticPool

from tenant_seed.core.config import get_settings

legacy_metadata = MetaData()

Table(
    "medicines_catalog",
    legacy_metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
)

Table(
    "procedure_catalogue",
    legacy_metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("category", String(100)),
    Column("description", Text),
    Column("preparation_instructions", Text),
)

Table(
    "lab_catalogue",
    legacy_metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("category", String(100)),
    Column("sample_type", String(100)),
    Column("turnaround_time", String(100)),
    Column("preparation_instructions", Text),
)

Table(
    "doctors",
    legacy_metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255)),
    Column("phone", String(50)),
    Column("specialization", String(100)),
    Column("consultation_fee", Integer),
    Column("is_active", Integer, default=1),
    Column("created_at", DateTime),
)

Table(
    "patients",
    legacy_metadata,
    Column("id", Integer, primary_key=True),
    Column("full_name", String(255), nullable=False),
    Column("email", String(255)),
    Column("phone", String(50)),
    Column("created_at", DateTime),
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Ensure get_settings cache is cleared before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine():
    """In-memory SQLite engine with the legacy tenant tables."""
    eng = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    legacy_metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def conn(engine):
    """Autocommit connection, matching how the seeders run."""
    c = engine.connect().execution_options(isolation_level="AUTOCOMMIT")
    yield c
    c.close()

