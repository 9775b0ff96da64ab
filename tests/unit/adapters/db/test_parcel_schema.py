"""Unit tests for the `parcel` table definition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateTable

from parcel_tracker.adapters.parcel_store.schema import parcel

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=magic-value-comparison


def test_columns_are_all_required():
    """Every column is NOT NULL and only `number` is the primary key."""
    assert [c.name for c in parcel.columns] == [
        "number",
        "client",
        "status",
        "address",
        "created_at",
    ]
    assert all(not c.nullable for c in parcel.columns)
    assert [c.name for c in parcel.primary_key.columns] == ["number"]


def test_sqlite_ddl_uses_autoincrement():
    """On SQLite the key is INTEGER ... AUTOINCREMENT so numbers are never reused."""
    ddl = str(CreateTable(parcel).compile(dialect=sqlite.dialect()))
    assert "INTEGER" in ddl
    assert "AUTOINCREMENT" in ddl


def test_postgres_ddl_uses_identity():
    """On Postgres the key is a BIGINT identity column."""
    ddl = str(CreateTable(parcel).compile(dialect=postgresql.dialect()))
    assert "BIGINT" in ddl
    assert "GENERATED BY DEFAULT AS IDENTITY" in ddl


def test_created_by_metadata(sqlite_engine_memory: Engine):
    """metadata.create_all() materializes the parcel table."""
    assert "parcel" in inspect(sqlite_engine_memory).get_table_names()


def test_postgres_ddl_has_no_length_limits():
    """Status and address are unbounded text and client ids are 64-bit."""
    ddl = str(CreateTable(parcel).compile(dialect=postgresql.dialect()))
    assert "client BIGINT NOT NULL" in ddl
    assert "status TEXT NOT NULL" in ddl
    assert "address TEXT NOT NULL" in ddl
    assert "VARCHAR(32)" in ddl  # created_at only
    assert ddl.count("VARCHAR") == 1
