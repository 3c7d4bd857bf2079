from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends

from courtcheck.api.deps import get_registry, get_today
from courtcheck.api.schemas.availability import AvailabilityCheckResponse
from courtcheck.core.config import settings
from courtcheck.services.availability_service import check_request
from courtcheck.services.registry import ResourceRegistry
from courtcheck.services.validation import validate_availability_request

router = APIRouter(prefix="/availability", tags=["availability"])
# Path used by the first clients, kept as an alias
legacy_router = APIRouter(tags=["availability"])


@legacy_router.post(
    "/api/court/availability/check",
    response_model=AvailabilityCheckResponse,
    response_model_exclude_none=True,
    include_in_schema=False,
)
@router.post("/check", response_model=AvailabilityCheckResponse, response_model_exclude_none=True)
def check_availability(
    body: Any = Body(default=None),
    registry: ResourceRegistry = Depends(get_registry),
    today: date = Depends(get_today),
) -> AvailabilityCheckResponse:
    """Check whether a court is free for the requested window.

    Body: ``{resourceId, date, startTime, durationMinutes, includePrice?}``.
    On a conflict the response names the clashing booking and the next free
    window of the same length that day, when there is one.
    """
    request = validate_availability_request(body, min_duration=settings.min_duration_minutes)
    result = check_request(registry, request, today)
    return AvailabilityCheckResponse.from_result(result, currency=settings.currency)
