from decimal import ROUND_HALF_UP, Decimal

from courtcheck.core.timeutil import Interval
from courtcheck.models.resource import Resource

_CENTS = Decimal("0.01")
_MINUTES_PER_HOUR = Decimal(60)


def _overlap_minutes(a: Interval, b: Interval) -> int:
    return max(0, min(a.end, b.end) - max(a.start, b.start))


def estimate_price(resource: Resource, interval: Interval) -> Decimal | None:
    """Price of booking the interval, or None when the resource has no rate.

    Minutes inside the peak window are charged at the peak rate (falling back
    to the base rate when no peak rate is set).
    """
    if resource.hourly_rate is None:
        return None
    peak = resource.peak_window
    peak_minutes = _overlap_minutes(interval, peak) if peak is not None else 0
    off_peak_minutes = interval.minutes - peak_minutes
    peak_rate = resource.peak_hourly_rate if resource.peak_hourly_rate is not None else resource.hourly_rate
    total = (resource.hourly_rate * off_peak_minutes + peak_rate * peak_minutes) / _MINUTES_PER_HOUR
    return total.quantize(_CENTS, rounding=ROUND_HALF_UP)
