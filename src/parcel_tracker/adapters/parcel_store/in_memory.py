"""In-memory ParcelStore implementation for testing purposes."""

import itertools
from dataclasses import replace

from parcel_tracker.domain.parcel import Parcel, status_value
from parcel_tracker.interfaces.parcel_store import ParcelNotFoundError, ParcelStore


class InMemoryParcelStore(ParcelStore):
    """Dict-backed ParcelStore.

    Note: This implementation is not thread-safe and is intended
    solely for use in single-threaded test scenarios
    """

    def __init__(self):
        self.parcels: dict[int, Parcel] = {}
        self._numbers = itertools.count(1)

    def add(self, parcel: Parcel) -> int:
        self._check_unpersisted(parcel)
        number = next(self._numbers)
        self.parcels[number] = replace(parcel, number=number)
        return number

    def get(self, number: int) -> Parcel:
        try:
            return self.parcels[number]
        except KeyError as e:
            raise ParcelNotFoundError(number) from e

    def get_by_client(self, client: int) -> list[Parcel]:
        return [p for _, p in sorted(self.parcels.items()) if p.client == client]

    def set_address(self, number: int, address: str) -> None:
        self.parcels[number] = replace(self.get(number), address=address)

    def set_status(self, number: int, status: str) -> None:
        self.parcels[number] = replace(self.get(number), status=status_value(status))

    def delete(self, number: int) -> None:
        self.parcels.pop(number, None)
