from decimal import Decimal

from courtcheck.api.schemas.availability import CamelModel, TimeRange


class ResourceSummary(CamelModel):
    resource_id: str
    name: str | None = None
    open_hours: str  # HH:MM-HH:MM
    hourly_rate: Decimal | None = None


class DayScheduleResponse(CamelModel):
    resource_id: str
    date: str  # YYYY-MM-DD
    open_hours: TimeRange
    bookings: list[TimeRange]
    free: list[TimeRange]
