"""Typed failures raised by the availability core.

Each request ends in exactly one outcome: a response or one of these errors.
The FastAPI exception handlers in ``courtcheck.main`` map them to HTTP
statuses; the core never builds HTTP responses itself.
"""

from enum import Enum


class AvailabilityError(Exception):
    """Base class for every failure the core reports to the transport."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationReason(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_DATE = "InvalidDate"
    INVALID_TIME = "InvalidTime"
    INVALID_DURATION = "InvalidDuration"


class ValidationError(AvailabilityError):
    def __init__(self, field: str, reason: ValidationReason, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.reason = reason


class NotFoundError(AvailabilityError):
    def __init__(self, resource_id: str) -> None:
        super().__init__(f"Resource {resource_id!r} not found.")
        self.resource_id = resource_id


class PolicyKind(str, Enum):
    OUT_OF_HOURS = "OutOfHours"
    PAST_DATE = "PastDate"
    FIXED_DURATION = "FixedDuration"


class PolicyViolation(AvailabilityError):
    def __init__(self, kind: PolicyKind, message: str, open_window: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.open_window = open_window


class InternalError(AvailabilityError):
    def __init__(self, message: str = "Something went wrong.") -> None:
        super().__init__(message)
