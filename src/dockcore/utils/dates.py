"""Day-granularity date helpers.

Booking dates arrive as calendar dates, ISO strings, or full timestamps
depending on where they were read from. Everything is reduced to a calendar
date before any comparison so time-of-day never produces fractional nights.
"""

import datetime as dt

DateLike = dt.date | dt.datetime | str


def to_day(value: DateLike) -> dt.date:
    """Normalize a date-like value to a calendar date.

    Timezone-aware timestamps are converted to UTC before the time is dropped.

    Args:
        value: A date, datetime, or ISO-8601 date/timestamp string

    Returns:
        The calendar date

    Raises:
        ValueError: If a string is not ISO-8601
        TypeError: If the value is not date-like
    """
    if isinstance(value, dt.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(dt.UTC)
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return dt.date.fromisoformat(text)
        except ValueError:
            return to_day(dt.datetime.fromisoformat(text))
    raise TypeError(f"Expected a date, datetime or ISO string, got {type(value).__name__}")


def night_count(start: DateLike, end: DateLike) -> int:
    """Number of nights between check-in and check-out (end exclusive)."""
    return (to_day(end) - to_day(start)).days


def days_until(target: DateLike, moment: DateLike) -> int:
    """Whole days from ``moment`` until ``target``, floored.

    Any point during a day counts as that whole day having started, so a
    cancellation at 23:59 the day before check-in is 1 day out.
    Negative when ``moment`` is after ``target``.
    """
    return (to_day(target) - to_day(moment)).days


def same_month(day: dt.date, month: dt.date) -> bool:
    """Whether ``day`` falls in the calendar month of ``month``."""
    return day.year == month.year and day.month == month.month
