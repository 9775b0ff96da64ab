"""Portable SQLAlchemy column types."""

from sqlalchemy import BigInteger, Integer

__all__ = ["BIGINT_PK"]

# SQLite only auto-assigns rowid-backed keys for a column typed exactly INTEGER
BIGINT_PK = BigInteger().with_variant(Integer(), "sqlite")
