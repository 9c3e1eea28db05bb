"""
Error kinds raised or reported by the reservation core.
"""


class ReservationError(Exception):
    """Base class for reservation core errors."""
    pass


class StorageUnavailable(ReservationError):
    """Backing record file cannot be opened, written or decoded."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Storage unavailable: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NotFound(ReservationError):
    """Referenced flight or PNR does not exist."""
    pass


class DuplicateFlightNumber(ReservationError):
    """A flight with the same number is already in the catalog."""

    def __init__(self, flight_number: int):
        self.flight_number = flight_number
        super().__init__(f"Flight number already exists: {flight_number}")


class InvalidAdjustment(ReservationError):
    """A seat delta would push a flight outside [0, MAX_SEATS]."""

    def __init__(self, flight_number: int, current: int, delta: int):
        self.flight_number = flight_number
        self.current = current
        self.delta = delta
        super().__init__(
            f"Cannot adjust seats on flight {flight_number}: "
            f"{current} {delta:+d} is out of range"
        )


class ValidationRejected(ReservationError):
    """A proposed field change failed its constraint and was not applied."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r} rejected: {reason}")
