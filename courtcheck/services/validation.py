"""Turn a raw JSON body into an AvailabilityRequest.

Checks run in a fixed order and stop at the first failure: resource id,
date, start time, duration. Unknown keys are ignored. Whether the resource
actually exists is decided later by the registry lookup.
"""

from collections.abc import Mapping
from typing import Any

from courtcheck.core.errors import ValidationError, ValidationReason
from courtcheck.core.timeutil import parse_iso_date, parse_time
from courtcheck.models.availability import AvailabilityRequest

MIN_DURATION_MINUTES = 30


def _missing(field: str) -> ValidationError:
    return ValidationError(field, ValidationReason.MISSING_FIELD, f"{field} is required.")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _resource_id(raw: Mapping[str, Any]) -> str:
    # courtId is the name older clients send
    value = raw.get("resourceId", raw.get("courtId"))
    if not isinstance(value, str) or not value.strip():
        raise _missing("resourceId")
    return value.strip()


def validate_date(value: Any) -> str:
    """A present, real YYYY-MM-DD calendar date; also used for query parameters."""
    if _is_blank(value):
        raise _missing("date")
    try:
        parse_iso_date(value)
    except ValueError:
        raise ValidationError(
            "date", ValidationReason.INVALID_DATE, "date must be a real calendar date in YYYY-MM-DD format."
        ) from None
    return value


def _start_time(value: Any) -> int:
    try:
        return parse_time(value)
    except ValueError:
        raise ValidationError(
            "startTime", ValidationReason.INVALID_TIME, "startTime must be a 24h time in HH:MM format."
        ) from None


def _time_slot(value: Any) -> tuple[int, int]:
    """Parse an "HH:MM-HH:MM" slot into (start, duration)."""
    invalid = ValidationError(
        "timeSlot", ValidationReason.INVALID_TIME, "timeSlot must be HH:MM-HH:MM with the end after the start."
    )
    if not isinstance(value, str) or value.count("-") != 1:
        raise invalid
    start_str, end_str = value.split("-")
    try:
        start, end = parse_time(start_str), parse_time(end_str)
    except ValueError:
        raise invalid from None
    if end <= start:
        raise invalid
    return start, end - start


def _duration(value: Any, min_duration: int, field: str = "durationMinutes") -> int:
    invalid = ValidationError(
        field,
        ValidationReason.INVALID_DURATION,
        f"{field} must cover at least {min_duration} minutes."
        if field == "timeSlot"
        else f"{field} must be an integer of at least {min_duration}.",
    )
    if isinstance(value, bool):
        raise invalid
    if isinstance(value, float):
        if not value.is_integer():
            raise invalid
        value = int(value)
    if not isinstance(value, int) or value < min_duration:
        raise invalid
    return value


def validate_availability_request(raw: Any, min_duration: int = MIN_DURATION_MINUTES) -> AvailabilityRequest:
    """Validate a raw request body. Raises ValidationError naming the first bad field."""
    if not isinstance(raw, Mapping):
        raise _missing("resourceId")

    resource_id = _resource_id(raw)
    day = validate_date(raw.get("date"))

    start_raw = raw.get("startTime")
    duration_raw = raw.get("durationMinutes")
    if _is_blank(start_raw) and duration_raw is None and not _is_blank(raw.get("timeSlot")):
        start, duration = _time_slot(raw["timeSlot"])
        duration_field = "timeSlot"
    else:
        if _is_blank(start_raw):
            raise _missing("startTime")
        start = _start_time(start_raw)
        if duration_raw is None:
            raise _missing("durationMinutes")
        duration = duration_raw
        duration_field = "durationMinutes"

    return AvailabilityRequest(
        resource_id=resource_id,
        date=day,
        start_time=start,
        duration_minutes=_duration(duration, min_duration, duration_field),
        include_price=raw.get("includePrice") is True,
    )
