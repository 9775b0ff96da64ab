"""Parcel service: the delivery workflow on top of a ParcelStore.

The store itself enforces nothing about statuses. This service adds the
rules of the delivery lifecycle:

- New parcels start as ``registered`` with a UTC creation timestamp.
- Status only moves forward, ``registered → sent → delivered``; advancing a
  delivered parcel leaves it unchanged.
- The address may only change, and the parcel may only be deleted, while it
  is still ``registered``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from parcel_tracker.domain.errors import ParcelNotRegisteredError
from parcel_tracker.domain.parcel import (
    Parcel,
    ParcelStatus,
    next_status,
    utc_timestamp,
)

if TYPE_CHECKING:
    from parcel_tracker.interfaces.parcel_store import ParcelStore

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ParcelService:
    """Register, track and edit parcels through an injected store."""

    def __init__(
        self, store: ParcelStore, clock: Callable[[], datetime] | None = None
    ) -> None:
        self.store = store
        self.clock = clock or _utc_now

    def register(self, client: int, address: str) -> Parcel:
        """Create a new ``registered`` parcel and return it with its number."""
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_timestamp(self.clock()),
        )
        number = self.store.add(parcel)
        logger.info(
            "Registered parcel #%d to %r for client %d at %s",
            number,
            address,
            client,
            parcel.created_at,
        )
        return replace(parcel, number=number)

    def get(self, number: int) -> Parcel:
        """Return a single parcel."""
        return self.store.get(number)

    def client_parcels(self, client: int) -> list[Parcel]:
        """Return every parcel of `client`, oldest number first."""
        return sorted(self.store.get_by_client(client), key=lambda p: p.number)

    def advance_status(self, number: int) -> Parcel:
        """Move a parcel to the next status of the delivery lifecycle.

        Returns:
            Parcel: The parcel after the change, or unchanged if it was
            already delivered.

        Raises:
            ParcelNotFoundError: If the parcel does not exist.
            UnknownStatusError: If the stored status is outside the lifecycle.
        """
        parcel = self.store.get(number)
        if (following := next_status(parcel.status)) is None:
            logger.info("Parcel #%d already has final status %r", number, parcel.status)
            return parcel
        self.store.set_status(number, following)
        logger.info("Parcel #%d status: %s -> %s", number, parcel.status, following)
        return replace(parcel, status=following)

    def change_address(self, number: int, address: str) -> Parcel:
        """Change the delivery address of a parcel that is still registered.

        Raises:
            ParcelNotFoundError: If the parcel does not exist.
            ParcelNotRegisteredError: If the parcel has already left.
        """
        parcel = self._require_registered(number, action="change the address of")
        self.store.set_address(number, address)
        logger.info("Parcel #%d address: %r -> %r", number, parcel.address, address)
        return replace(parcel, address=address)

    def delete(self, number: int) -> None:
        """Delete a parcel that is still registered.

        Raises:
            ParcelNotFoundError: If the parcel does not exist.
            ParcelNotRegisteredError: If the parcel has already left.
        """
        self._require_registered(number, action="delete")
        self.store.delete(number)
        logger.info("Deleted parcel #%d", number)

    def _require_registered(self, number: int, *, action: str) -> Parcel:
        parcel = self.store.get(number)
        if parcel.status != ParcelStatus.REGISTERED:
            raise ParcelNotRegisteredError(number, parcel.status, action)
        return parcel
