"""Interval overlap and gap search.

Pure calculation module: no registry, no config, no FastAPI. All times are
minutes since local midnight and every interval is half-open.
"""

from collections.abc import Iterable

from courtcheck.core.errors import PolicyKind, PolicyViolation
from courtcheck.core.timeutil import Interval, format_time
from courtcheck.models.availability import AvailabilityResult
from courtcheck.models.resource import Resource


def sort_bookings(bookings: Iterable[Interval]) -> list[Interval]:
    return sorted(bookings, key=lambda b: (b.start, b.end))


def first_conflict(requested: Interval, sorted_bookings: Iterable[Interval]) -> Interval | None:
    """Earliest-starting booking that overlaps the request, if any."""
    for b in sorted_bookings:
        if requested.overlaps(b):
            return b
    return None


def next_available(
    open_hours: Interval,
    sorted_bookings: Iterable[Interval],
    not_before: int,
    duration_minutes: int,
) -> Interval | None:
    """First-fit search for a free interval of the given length on the same day.

    Starts at ``not_before`` (clamped to opening time) and walks the bookings in
    start order, jumping past each one that leaves no room. Bookings may
    overlap each other. Never returns anything that ends after closing.
    """
    cursor = max(not_before, open_hours.start)
    for b in sorted_bookings:
        if cursor + duration_minutes > open_hours.end:
            return None
        if cursor + duration_minutes <= b.start:
            return Interval(cursor, cursor + duration_minutes)
        cursor = max(cursor, b.end)
    if cursor + duration_minutes <= open_hours.end:
        return Interval(cursor, cursor + duration_minutes)
    return None


def free_intervals(open_hours: Interval, bookings: Iterable[Interval]) -> list[Interval]:
    """Gaps of open time not covered by any booking, in order."""
    gaps: list[Interval] = []
    cursor = open_hours.start
    for b in sort_bookings(bookings):
        if b.start >= open_hours.end:
            break
        if b.start > cursor:
            gaps.append(Interval(cursor, b.start))
        cursor = max(cursor, b.end)
    if cursor < open_hours.end:
        gaps.append(Interval(cursor, open_hours.end))
    return gaps


def ensure_within_open_hours(open_hours: Interval, requested: Interval) -> None:
    if requested.start < open_hours.start or requested.end > open_hours.end:
        window = open_hours.label()
        raise PolicyViolation(
            PolicyKind.OUT_OF_HOURS,
            f"Requested time {format_time(requested.start)}-{format_time(requested.end)} "
            f"is outside open hours ({window}).",
            open_window=window,
        )


def check_availability(
    resource: Resource, date: str, start_time: int, duration_minutes: int
) -> AvailabilityResult:
    """Decide whether [start_time, start_time + duration_minutes) is free on the date.

    Raises PolicyViolation(OutOfHours) when the interval does not sit fully
    inside the resource's open hours. On a conflict the result carries the
    first conflicting booking and, when one exists, the next free interval of
    the same length.
    """
    open_hours = resource.open_hours
    requested = Interval(start_time, start_time + duration_minutes)
    ensure_within_open_hours(open_hours, requested)

    bookings = sort_bookings(resource.bookings_on(date))
    conflict = first_conflict(requested, bookings)
    if conflict is None:
        return AvailabilityResult(resource.id, date, requested, is_available=True)

    return AvailabilityResult(
        resource.id,
        date,
        requested,
        is_available=False,
        conflict=conflict,
        next_available=next_available(open_hours, bookings, start_time, duration_minutes),
    )
