"""Interface for persisting parcel records.

Defines the `ParcelStore` port: the only gateway between the application and
stored parcel rows. Implementations map `Parcel` values to rows of a single
table and assign `number` on insert.

Contract overview
-----------------
- Every operation is a single atomic statement; nothing spans operations.
- Storage failures raised by the underlying engine propagate unmodified.
  The only normalized condition is "no matching row", raised as
  `ParcelNotFoundError` from `get`, `set_address` and `set_status`.
- `delete` is idempotent: a missing number is not an error.
- Status values are not validated; any string may be written.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parcel_tracker.domain.parcel import Parcel


class ParcelStore(abc.ABC):
    """Record-level CRUD over parcels plus a by-client query."""

    @abc.abstractmethod
    def add(self, parcel: Parcel) -> int:
        """Persist a new parcel and return its generated number.

        Args:
            parcel: The record to store. Its `number` must be `0`.

        Returns:
            int: The new, non-zero parcel number.

        Raises:
            ValueError: If `parcel.number` is already set.
        """

    @abc.abstractmethod
    def get(self, number: int) -> Parcel:
        """Return the parcel stored under `number`, exactly as stored.

        Raises:
            ParcelNotFoundError: If no parcel has this number.
        """

    @abc.abstractmethod
    def get_by_client(self, client: int) -> list[Parcel]:
        """Return every parcel belonging to `client`.

        Order is not part of the contract. A client without parcels yields an
        empty list.
        """

    @abc.abstractmethod
    def set_address(self, number: int, address: str) -> None:
        """Replace the address of a parcel; no other field changes.

        Raises:
            ParcelNotFoundError: If no parcel has this number.
        """

    @abc.abstractmethod
    def set_status(self, number: int, status: str) -> None:
        """Replace the status of a parcel; no other field changes.

        Raises:
            ParcelNotFoundError: If no parcel has this number.
        """

    @abc.abstractmethod
    def delete(self, number: int) -> None:
        """Remove a parcel permanently.

        Deleting a number that does not exist is a no-op.
        """

    @staticmethod
    def _check_unpersisted(parcel: Parcel) -> None:
        if parcel.number != 0:
            raise ValueError(
                f"parcel already has number {parcel.number}; add() assigns numbers"
            )
