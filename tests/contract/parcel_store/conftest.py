"""Pytest fixtures for ParcelStore contract tests.

Provided fixtures
-----------------
- **store**: Parametrized factory that returns a **fresh**, empty
  `ParcelStore` per test. Supports `"memory"` (the dict-backed
  implementation) and the SQLAlchemy implementation over an in-memory SQLite
  database, a migrated SQLite file and a migrated Postgres container. The
  Postgres case is skipped automatically when Docker is unavailable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from parcel_tracker.adapters.parcel_store import (
    InMemoryParcelStore,
    SqlAlchemyParcelStore,
)

if TYPE_CHECKING:
    from parcel_tracker.interfaces.parcel_store import ParcelStore


@pytest.fixture(params=["memory", "sql_memory", "sql_file", "postgres"])
def store(request: pytest.FixtureRequest) -> ParcelStore:
    """Return a fresh parcel store instance for the requested backend.

    Current params:
      - `"memory"` → `InMemoryParcelStore`
      - `"sql_memory"` → `SqlAlchemyParcelStore` on in-memory SQLite
      - `"sql_file"` → `SqlAlchemyParcelStore` on an Alembic-migrated SQLite file
      - `"postgres"` → `SqlAlchemyParcelStore` on an Alembic-migrated Postgres

    Engines are requested lazily so that only the selected backend is built.
    """

    match request.param:
        case "memory":
            return InMemoryParcelStore()
        case "sql_memory":
            return SqlAlchemyParcelStore(request.getfixturevalue("sqlite_engine_memory"))
        case "sql_file":
            return SqlAlchemyParcelStore(request.getfixturevalue("sqlite_engine_file"))
        case "postgres":
            return SqlAlchemyParcelStore(request.getfixturevalue("postgres_engine"))
        case _:
            raise ValueError(f"unknown store type: {request.param}")
