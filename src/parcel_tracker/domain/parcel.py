"""The parcel record and its delivery lifecycle.

A `Parcel` is a plain, immutable value. The store assigns `number` on
creation; until then it is `0`. `created_at` is an RFC 3339 UTC string that is
written once and handed back verbatim, so no timezone conversion happens on
the way in or out of storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from .errors import UnknownStatusError

RFC3339_UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"  # pragma: no mutate


class ParcelStatus(str, Enum):
    """Delivery status vocabulary.

    The store accepts any string as a status; this enum only names the values
    the delivery lifecycle knows about.
    """

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    def __str__(self) -> str:
        return self.value


_LIFECYCLE: dict[ParcelStatus, ParcelStatus | None] = {
    ParcelStatus.REGISTERED: ParcelStatus.SENT,
    ParcelStatus.SENT: ParcelStatus.DELIVERED,
    ParcelStatus.DELIVERED: None,
}


def next_status(status: str) -> ParcelStatus | None:
    """Return the status that follows `status`, or None if it is final.

    Raises:
        UnknownStatusError: If `status` is not part of the lifecycle.
    """
    try:
        current = ParcelStatus(status)
    except ValueError as e:
        raise UnknownStatusError(status) from e
    return _LIFECYCLE[current]


def utc_timestamp(moment: datetime | None = None) -> str:
    """Render `moment` (default: now) as an RFC 3339 UTC string.

    Naive datetimes are treated as UTC. Sub-second precision is dropped.

    Example:
        ``utc_timestamp(datetime(2024, 1, 1, 12, tzinfo=timezone.utc))``
        returns ``"2024-01-01T12:00:00Z"``.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(RFC3339_UTC_FORMAT)


def status_value(value: Any) -> Any:
    """Return the bare value of a str-based enum member; other values pass through."""
    return value.value if isinstance(value, Enum) else value


@dataclass(frozen=True, slots=True)
class Parcel:
    """A tracked shipment.

    Attributes:
        client: Opaque client identifier.
        status: Delivery status; usually a `ParcelStatus` value.
        address: Free-form delivery address.
        created_at: RFC 3339 UTC creation timestamp.
        number: Store-assigned identifier; `0` until persisted.
    """

    client: int
    status: str
    address: str
    created_at: str
    number: int = 0

    def __post_init__(self) -> None:
        if self.number < 0:
            raise ValueError("number must be >= 0")
        object.__setattr__(self, "status", status_value(self.status))

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned a number."""
        return self.number != 0

    def as_insertable_row(self) -> dict[str, Any]:
        """Column values for an insert; `number` is left to the store."""
        return {
            "client": self.client,
            "status": self.status,
            "address": self.address,
            "created_at": self.created_at,
        }
