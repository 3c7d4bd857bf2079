import re
from datetime import date
from typing import NamedTuple

MINUTES_PER_DAY = 24 * 60

# ASCII digits only; fullmatch so a trailing newline is rejected
_TIME_RE = re.compile(r"([0-9]{2}):([0-9]{2})")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class Interval(NamedTuple):
    """Half-open range [start, end) in minutes since local midnight."""

    start: int
    end: int

    @property
    def minutes(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "Interval") -> bool:
        # Touching endpoints do not overlap
        return self.start < other.end and other.start < self.end

    def label(self) -> str:
        return f"{format_time(self.start)}-{format_time(self.end)}"


def parse_time(value: str) -> int:
    """Parse "HH:MM" into minutes since midnight. Raises ValueError on bad input."""
    match = _TIME_RE.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"expected HH:MM, got {value!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"time out of range: {value!r}")
    return hour * 60 + minute


def format_time(minutes: int) -> str:
    """Inverse of parse_time; 1440 renders as "24:00"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_iso_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD calendar date. Raises ValueError on bad input."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(value)


def parse_interval(start: str, end: str) -> Interval:
    """Build an Interval from two "HH:MM" strings; end must be after start.

    An end of "24:00" is allowed so a window can run to midnight.
    """
    start_min = parse_time(start)
    end_min = MINUTES_PER_DAY if end == "24:00" else parse_time(end)
    if start_min >= end_min:
        raise ValueError(f"interval start {start} must be before end {end}")
    return Interval(start_min, end_min)
