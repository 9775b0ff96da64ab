"""Domain layer: the parcel record, its status vocabulary, and domain errors."""

from .parcel import Parcel, ParcelStatus, next_status, utc_timestamp

__all__ = ["Parcel", "ParcelStatus", "next_status", "utc_timestamp"]
