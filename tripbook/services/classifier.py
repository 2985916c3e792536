"""Group trips into current / upcoming / past relative to a reference date.

Each bucket has its own predicate and is filtered independently from the
same input, so buckets are not mutually exclusive by construction: a trip
whose end date precedes its start date can show up in more than one bucket
(or none). Trips with well-ordered dates land in exactly one bucket, or none
when a date is missing.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, List, NamedTuple, Optional, Union

Reference = Union[date, datetime]


class Buckets(NamedTuple):
    current: List[Any]
    upcoming: List[Any]
    past: List[Any]


def reference_date(now: Optional[Reference] = None) -> date:
    """Calendar date used as "now"; time of day does not matter for trips."""
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def is_current(trip: Any, today: date) -> bool:
    start, end = trip.start_date, trip.end_date
    return start is not None and end is not None and start <= today <= end


def is_upcoming(trip: Any, today: date) -> bool:
    return trip.start_date is not None and trip.start_date > today


def is_past(trip: Any, today: date) -> bool:
    return trip.end_date is not None and trip.end_date < today


def classify(trips: Iterable[Any], now: Optional[Reference] = None) -> Buckets:
    """Partition `trips` into (current, upcoming, past), keeping input order.

    Works on anything exposing `start_date` / `end_date` attributes holding a
    `date` or None. The input is not modified.
    """
    today = reference_date(now)
    items = list(trips)
    return Buckets(
        current=[t for t in items if is_current(t, today)],
        upcoming=[t for t in items if is_upcoming(t, today)],
        past=[t for t in items if is_past(t, today)],
    )
