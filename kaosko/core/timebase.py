from __future__ import annotations
from datetime import date, datetime, timedelta
from typing import TypeVar

D = TypeVar("D", date, datetime)

DATE_MIN = datetime.min
DATE_MAX = datetime.max

def day_span(start: date, end: date) -> int:
    """Whole days between start and end (partial days dropped)."""
    return (end - start).days

def offset_by_fraction(start: D, span_days: int, fraction: float) -> D:
    offset = timedelta(days=fraction * span_days)
    limit = timedelta(days=span_days)
    # microsecond rounding may land exactly on the exclusive end
    if span_days > 0 and offset >= limit:
        offset = limit - timedelta(microseconds=1)
    return start + offset

def midnight(value: D) -> D:
    if isinstance(value, datetime):
        return value.replace(hour=0, minute=0, second=0, microsecond=0)
    return value
