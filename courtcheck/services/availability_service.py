import logging
from datetime import date

from courtcheck.core.config import settings
from courtcheck.core.errors import PolicyKind, PolicyViolation
from courtcheck.core.timeutil import parse_iso_date
from courtcheck.models.availability import AvailabilityRequest, AvailabilityResult
from courtcheck.services.availability_engine import check_availability
from courtcheck.services.pricing_service import estimate_price
from courtcheck.services.registry import ResourceRegistry

logger = logging.getLogger(__name__)


def _enforce_booking_policies(request: AvailabilityRequest, today: date) -> None:
    """Stricter rules layered on top of the engine, both switchable in settings."""
    if settings.reject_past_dates and parse_iso_date(request.date) < today:
        raise PolicyViolation(PolicyKind.PAST_DATE, "Date cannot be in the past.")
    fixed = settings.fixed_slot_minutes
    if fixed is not None and request.duration_minutes != fixed:
        raise PolicyViolation(PolicyKind.FIXED_DURATION, f"Only {fixed}-minute time slots are allowed.")


def check_request(registry: ResourceRegistry, request: AvailabilityRequest, today: date) -> AvailabilityResult:
    """Lookup, policies, engine, then the optional price estimate.

    Raises NotFoundError for an unknown resource and PolicyViolation when a
    booking rule or the open hours reject the request.
    """
    resource = registry.get(request.resource_id)
    _enforce_booking_policies(request, today)
    result = check_availability(resource, request.date, request.start_time, request.duration_minutes)

    if result.is_available and request.include_price:
        result = result._replace(estimated_price=estimate_price(resource, request.interval))

    if result.is_available:
        logger.info(
            "Resource %s free on %s for %s",
            request.resource_id, request.date, request.interval.label(),
        )
    else:
        logger.info(
            "Resource %s busy on %s for %s (conflict %s, next %s)",
            request.resource_id,
            request.date,
            request.interval.label(),
            result.conflict.label(),
            result.next_available.label() if result.next_available else "none",
        )
    return result
