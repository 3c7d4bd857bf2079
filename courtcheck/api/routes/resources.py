from fastapi import APIRouter, Depends, Query

from courtcheck.api.deps import get_registry
from courtcheck.api.schemas.availability import TimeRange
from courtcheck.api.schemas.resource import DayScheduleResponse, ResourceSummary
from courtcheck.services.availability_engine import free_intervals, sort_bookings
from courtcheck.services.registry import ResourceRegistry
from courtcheck.services.validation import validate_date

router = APIRouter(prefix="/resources", tags=["resources"])


@router.get("", response_model=list[ResourceSummary])
def list_resources(registry: ResourceRegistry = Depends(get_registry)) -> list[ResourceSummary]:
    return [
        ResourceSummary(
            resource_id=r.id,
            name=r.name,
            open_hours=r.open_hours.label(),
            hourly_rate=r.hourly_rate,
        )
        for r in registry.all()
    ]


@router.get("/{resource_id}/schedule", response_model=DayScheduleResponse)
def day_schedule(
    resource_id: str,
    date_param: str = Query(..., alias="date"),
    registry: ResourceRegistry = Depends(get_registry),
) -> DayScheduleResponse:
    """Open hours, bookings and free windows of one court for a date."""
    validate_date(date_param)
    resource = registry.get(resource_id)
    bookings = sort_bookings(resource.bookings_on(date_param))
    return DayScheduleResponse(
        resource_id=resource.id,
        date=date_param,
        open_hours=TimeRange.from_interval(resource.open_hours),
        bookings=[TimeRange.from_interval(b) for b in bookings],
        free=[TimeRange.from_interval(g) for g in free_intervals(resource.open_hours, bookings)],
    )
