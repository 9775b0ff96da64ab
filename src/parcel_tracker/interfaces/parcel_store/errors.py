"""Exceptions for parcel store operations."""


class ParcelStoreError(Exception):
    """Base class for parcel store errors."""


class ParcelNotFoundError(ParcelStoreError):
    """No parcel row matches the requested number.

    Attributes:
        number (int): The parcel number that was looked up.
    """

    def __init__(self, number: int):
        super().__init__(f"Parcel #{number} not found.")
        self.number = number
