"""Parcel Store Interface Package"""

from .errors import ParcelNotFoundError, ParcelStoreError
from .parcel_store import ParcelStore

__all__ = [
    "ParcelNotFoundError",
    "ParcelStore",
    "ParcelStoreError",
]
