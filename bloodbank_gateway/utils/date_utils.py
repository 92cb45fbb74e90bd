"""Date manipulation utilities"""

from datetime import date, datetime, timedelta


def as_date(value: date) -> date:
    """Drop the time component of a datetime; plain dates pass through"""
    return value.date() if isinstance(value, datetime) else value


def _is_aware(value: date) -> bool:
    return isinstance(value, datetime) and value.utcoffset() is not None


def days_between(start: date, end: date) -> int:
    """
    Whole days elapsed from start to end (floored, negative if end is earlier).

    Values that cannot be subtracted directly (date vs datetime, naive vs
    timezone-aware datetime) are compared on their own calendar dates.
    """
    mixed_kinds = isinstance(start, datetime) != isinstance(end, datetime)
    if mixed_kinds or _is_aware(start) != _is_aware(end):
        start, end = as_date(start), as_date(end)
    return (end - start).days


def add_days(from_date: date, days: int) -> date:
    """Shift a date (or datetime) by a number of calendar days"""
    return from_date + timedelta(days=days)
