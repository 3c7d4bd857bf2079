from decimal import Decimal
from typing import NamedTuple

from courtcheck.core.timeutil import Interval


class AvailabilityRequest(NamedTuple):
    """A validated availability check. Built per call and never stored."""

    resource_id: str
    date: str  # YYYY-MM-DD
    start_time: int  # minutes since midnight
    duration_minutes: int
    include_price: bool = False

    @property
    def interval(self) -> Interval:
        return Interval(self.start_time, self.start_time + self.duration_minutes)


class AvailabilityResult(NamedTuple):
    resource_id: str
    date: str
    requested: Interval
    is_available: bool
    conflict: Interval | None = None
    next_available: Interval | None = None
    estimated_price: Decimal | None = None
