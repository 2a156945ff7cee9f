"""
Date window helpers shared by the analytics services.

Windows are expressed as ISO strings because they are passed straight to
PostgREST range filters.
"""
from datetime import date, datetime, time, tzinfo
from typing import Tuple

END_OF_DAY_SUFFIX = "T23:59:59.999"


def day_window(start_date: date, end_date: date) -> Tuple[str, str]:
    """
    Inclusive window from the start of `start_date` to the end of `end_date`.

    >>> day_window(date(2024, 1, 1), date(2024, 1, 31))
    ('2024-01-01', '2024-01-31T23:59:59.999')
    """
    return start_date.isoformat(), f"{end_date.isoformat()}{END_OF_DAY_SUFFIX}"


def normalize_day_range(
    start: date,
    end: date,
    tz: tzinfo,
) -> Tuple[datetime, datetime]:
    """
    Expand a date range to [start 00:00:00.000, end 23:59:59.999] in `tz`.

    Accepts datetimes too; only their calendar date (in `tz` when aware)
    is used.
    """
    start_day = _local_date(start, tz)
    end_day = _local_date(end, tz)
    return (
        datetime.combine(start_day, time.min, tzinfo=tz),
        datetime.combine(end_day, time(23, 59, 59, 999000), tzinfo=tz),
    )


def _local_date(value: date, tz: tzinfo) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()
    return value
