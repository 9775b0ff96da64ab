"""Parcel table schema.

One row per parcel. The five columns mirror the fields of
`parcel_tracker.domain.parcel.Parcel`.

| Column     | Notes                                             |
|------------|---------------------------------------------------|
| number     | primary key, assigned by the database on insert   |
| client     | opaque 64-bit client identifier                   |
| status     | unbounded text; the store does not validate it    |
| address    | unbounded free-form delivery address              |
| created_at | RFC 3339 UTC string, stored verbatim              |

Numbers are never reused: SQLite uses ``AUTOINCREMENT`` and Postgres an
``IDENTITY`` column.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, Identity, String, Table, Text

from parcel_tracker.adapters.db.metadata import metadata
from parcel_tracker.adapters.db.sa_types import BIGINT_PK

__all__ = ["parcel"]

parcel = Table(
    "parcel",
    metadata,
    Column(
        "number",
        BIGINT_PK,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Parcel number, assigned on insert and never reused.",
    ),
    Column(
        "client",
        BigInteger,
        nullable=False,
        comment="Opaque client identifier.",
    ),
    Column(
        "status",
        Text,
        nullable=False,
        comment="Delivery status (e.g. registered, sent, delivered).",
    ),
    Column(
        "address",
        Text,
        nullable=False,
        comment="Delivery address.",
    ),
    Column(
        "created_at",
        String(32),
        nullable=False,
        comment="RFC 3339 UTC creation timestamp, stored as given.",
    ),
    sqlite_autoincrement=True,
    comment="Tracked parcels. One row per parcel.",
)
