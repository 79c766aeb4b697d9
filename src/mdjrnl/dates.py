"""Date-based namespaces and headers."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Optional

from .models import Namespace, UsageError


def format_date_header(day: date) -> str:
    """``# Thursday  7 March 2024``: day of month right-aligned in two columns."""
    weekday = calendar.day_name[day.weekday()]
    month = calendar.month_name[day.month]
    return f"# {weekday} {day.day:>2} {month} {day.year}"


def for_date(year: int, month: int, day: int) -> tuple[Namespace, str]:
    """Namespace ``[year, month, day]`` and header for a calendar date.

    Raises:
        UsageError: If the date does not exist.
    """
    try:
        when = date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise UsageError(f"Not a valid date: {year}-{month}-{day} ({e})") from e
    return [str(year), str(month), str(day)], format_date_header(when)


def for_today(today: Optional[date] = None) -> tuple[Namespace, str]:
    """Namespace and header for the current local date."""
    if today is None:
        today = date.today()
    return for_date(today.year, today.month, today.day)
