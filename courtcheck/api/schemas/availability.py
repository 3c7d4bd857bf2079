from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from courtcheck.core.timeutil import Interval, format_time
from courtcheck.models.availability import AvailabilityResult


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeRange(CamelModel):
    start: str  # HH:MM
    end: str  # HH:MM

    @classmethod
    def from_interval(cls, interval: Interval) -> "TimeRange":
        return cls(start=format_time(interval.start), end=format_time(interval.end))


class PriceEstimate(CamelModel):
    amount: Decimal
    currency: str


class AvailabilityCheckResponse(CamelModel):
    resource_id: str
    date: str  # YYYY-MM-DD
    start_time: str
    end_time: str
    is_available: bool
    conflict: TimeRange | None = None
    next_available: TimeRange | None = None
    estimated_price: PriceEstimate | None = None

    @classmethod
    def from_result(cls, result: AvailabilityResult, currency: str) -> "AvailabilityCheckResponse":
        return cls(
            resource_id=result.resource_id,
            date=result.date,
            start_time=format_time(result.requested.start),
            end_time=format_time(result.requested.end),
            is_available=result.is_available,
            conflict=TimeRange.from_interval(result.conflict) if result.conflict else None,
            next_available=TimeRange.from_interval(result.next_available) if result.next_available else None,
            estimated_price=(
                PriceEstimate(amount=result.estimated_price, currency=currency)
                if result.estimated_price is not None
                else None
            ),
        )


class ErrorResponse(CamelModel):
    detail: str
    field: str | None = None
    reason: str | None = None
