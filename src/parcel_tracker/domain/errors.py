"""Domain-layer error definitions."""


class DomainError(Exception):
    """Base class for domain-layer errors."""


class UnknownStatusError(DomainError):
    """Raised when a status string is not part of the delivery lifecycle."""

    def __init__(self, status: str) -> None:
        super().__init__(f"Unknown parcel status '{status}'.")
        self.status = status


class InvalidTransitionError(DomainError):
    """Raised when a parcel is in an invalid state for the attempted action."""


class ParcelNotRegisteredError(InvalidTransitionError):
    """Raised when an action requires a parcel that is still 'registered'."""

    def __init__(self, number: int, status: str, action: str) -> None:
        super().__init__(
            f"Cannot {action} parcel #{number}: status is '{status}', "
            "expected 'registered'."
        )
        self.number = number
        self.status = status
        self.action = action
