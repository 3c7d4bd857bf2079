from decimal import Decimal

from pydantic import model_validator
from sqlmodel import Field, SQLModel

from courtcheck.core.timeutil import Interval, parse_interval, parse_iso_date


class BookingWindow(SQLModel):
    start: str  # HH:MM
    end: str  # HH:MM, exclusive

    @model_validator(mode="after")
    def _check_window(self) -> "BookingWindow":
        parse_interval(self.start, self.end)
        return self

    @property
    def interval(self) -> Interval:
        return parse_interval(self.start, self.end)


class ResourceBase(SQLModel):
    id: str = Field(min_length=1)
    name: str | None = None
    open: str = "08:00"
    close: str = "22:00"
    hourly_rate: Decimal | None = Field(default=None, ge=0)
    peak_start: str | None = None
    peak_end: str | None = None
    peak_hourly_rate: Decimal | None = Field(default=None, ge=0)


class Resource(ResourceBase):
    """A court with fixed daily open hours and its bookings keyed by ISO date."""

    bookings: dict[str, list[BookingWindow]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_schedule(self) -> "Resource":
        parse_interval(self.open, self.close)
        if (self.peak_start is None) != (self.peak_end is None):
            raise ValueError("peak_start and peak_end must be given together")
        if self.peak_start is not None:
            parse_interval(self.peak_start, self.peak_end)
        for day in self.bookings:
            parse_iso_date(day)
        return self

    @property
    def open_hours(self) -> Interval:
        return parse_interval(self.open, self.close)

    @property
    def peak_window(self) -> Interval | None:
        if self.peak_start is None or self.peak_end is None:
            return None
        return parse_interval(self.peak_start, self.peak_end)

    def bookings_on(self, day: str) -> list[Interval]:
        """Booked intervals for the date in stored order; empty when none."""
        return [b.interval for b in self.bookings.get(day, [])]
