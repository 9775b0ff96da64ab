"""Application services orchestrating the parcel store."""

from .parcel_service import ParcelService

__all__ = ["ParcelService"]
