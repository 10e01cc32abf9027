# core/calendar_helpers.py

import calendar
from datetime import date, datetime, timedelta
from typing import Tuple, Union


DateLike = Union[date, datetime]


def parse_month(value: str) -> Tuple[int, int]:
    """'2025-03' → (2025, 3). Raises ValueError on anything else."""
    try:
        year_str, month_str = value.split("-")
        year, month = int(year_str), int(month_str)
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")

    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{value}', expected YYYY-MM")
    return year, month


def month_grid_range(year: int, month: int) -> Tuple[date, date]:
    """
    First and last day shown in a Monday-first month grid:
    the Monday on/before the 1st through the Sunday on/after the last day.
    """
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])

    grid_start = first - timedelta(days=first.weekday())
    grid_end = last + timedelta(days=6 - last.weekday())
    return grid_start, grid_end


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def overlaps(start: DateLike, end: DateLike, range_start: DateLike, range_end: DateLike) -> bool:
    """Inclusive day-level overlap of [start, end] with [range_start, range_end]."""
    return _as_date(start) <= _as_date(range_end) and _as_date(end) >= _as_date(range_start)
