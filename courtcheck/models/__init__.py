from courtcheck.models.availability import AvailabilityRequest, AvailabilityResult
from courtcheck.models.resource import BookingWindow, Resource, ResourceBase

__all__ = [
    "AvailabilityRequest",
    "AvailabilityResult",
    "BookingWindow",
    "Resource",
    "ResourceBase",
]
