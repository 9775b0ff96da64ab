"""SQLAlchemy-backed ParcelStore adapter.

Maps `Parcel` values to rows of the `parcel` table (see
adapters.parcel_store.schema). Every operation runs as a single statement in
its own transaction on the Engine it was given, so a successful call is
committed when it returns.

Errors:
    - "No matching row" becomes `ParcelNotFoundError` for get/set_*.
    - Everything the driver raises (OperationalError, IntegrityError, ...)
      propagates untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from parcel_tracker.domain.parcel import Parcel, status_value
from parcel_tracker.interfaces.parcel_store import ParcelNotFoundError, ParcelStore

from .schema import parcel as parcel_table

if TYPE_CHECKING:
    from sqlalchemy import Update
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class SqlAlchemyParcelStore(ParcelStore):
    """ParcelStore over any SQLAlchemy Engine (SQLite or Postgres)."""

    def __init__(self, engine: Engine):
        self.engine = engine

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def add(self, parcel: Parcel) -> int:
        self._check_unpersisted(parcel)
        stmt = (
            insert(parcel_table)
            .values(**parcel.as_insertable_row())
            .returning(parcel_table.c.number)
        )
        with self.engine.begin() as connection:
            number = int(connection.execute(stmt).scalar_one())
        logger.debug("Inserted parcel #%d for client %d", number, parcel.client)
        return number

    def get(self, number: int) -> Parcel:
        stmt = select(parcel_table).where(parcel_table.c.number == number)
        with self.engine.begin() as connection:
            row = connection.execute(stmt).mappings().one_or_none()
        if row is None:
            raise ParcelNotFoundError(number)
        return Parcel(**row)

    def get_by_client(self, client: int) -> list[Parcel]:
        stmt = (
            select(parcel_table)
            .where(parcel_table.c.client == client)
            .order_by(parcel_table.c.number.asc())
        )
        with self.engine.begin() as connection:
            rows = connection.execute(stmt).mappings().all()
        return [Parcel(**row) for row in rows]

    def set_address(self, number: int, address: str) -> None:
        self._update_one(
            number,
            update(parcel_table)
            .where(parcel_table.c.number == number)
            .values(address=address),
        )
        logger.debug("Parcel #%d address set to %r", number, address)

    def set_status(self, number: int, status: str) -> None:
        self._update_one(
            number,
            update(parcel_table)
            .where(parcel_table.c.number == number)
            .values(status=status_value(status)),
        )
        logger.debug("Parcel #%d status set to %r", number, status_value(status))

    def delete(self, number: int) -> None:
        stmt = delete(parcel_table).where(parcel_table.c.number == number)
        with self.engine.begin() as connection:
            deleted = connection.execute(stmt).rowcount
        logger.debug("Deleted parcel #%d (rows=%d)", number, deleted)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    def _update_one(self, number: int, stmt: Update) -> None:
        """Execute an UPDATE keyed on `number`; raise if it matched nothing."""
        with self.engine.begin() as connection:
            matched = connection.execute(stmt).rowcount
        if matched == 0:
            raise ParcelNotFoundError(number)
