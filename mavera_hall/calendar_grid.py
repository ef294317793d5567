"""
Month grid layout shared by every calendar view.

Weeks start on Sunday. A grid is a flat list of cells: ``None`` for the
placeholders that align the 1st of the month to its weekday column (and pad
the last week), then one ``date`` per day of the month.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Callable, Dict, Iterable, List, Optional

from .i18n import lookup

Cell = Optional[date]


def month_start(value: date) -> date:
    return date(value.year, value.month, 1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def starting_day(value: date) -> int:
    """Weekday of the 1st of the month, Sunday = 0 ... Saturday = 6."""
    return (month_start(value).weekday() + 1) % 7


def build_month_grid(value: date, pad_last_week: bool = True) -> List[Cell]:
    first = month_start(value)
    cells: List[Cell] = [None] * starting_day(first)
    cells.extend(
        date(first.year, first.month, d) for d in range(1, days_in_month(first.year, first.month) + 1)
    )
    if pad_last_week and len(cells) % 7:
        cells.extend([None] * (7 - len(cells) % 7))
    return cells


def month_weeks(value: date) -> List[List[Cell]]:
    cells = build_month_grid(value)
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def shift_month(value: date, delta: int) -> date:
    index = value.year * 12 + (value.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def parse_month(raw: Optional[str], default: date) -> date:
    """Parse ``YYYY-MM`` from a query string; anything else gives *default*."""
    if raw:
        try:
            return datetime.strptime(raw.strip(), "%Y-%m").date()
        except ValueError:
            pass
    return month_start(default)


def month_bounds(value: date):
    """(first day, first day of next month) for range queries."""
    first = month_start(value)
    return first, shift_month(first, 1)


def group_by_day(items: Iterable, key: Callable, end: Optional[Callable] = None) -> Dict[date, list]:
    """
    Bucket *items* by the day *key* returns. With *end*, an item spanning
    midnight is listed on every day its (start, end) interval touches.
    """
    grouped = defaultdict(list)
    for item in items:
        start = key(item)
        day = start.date() if isinstance(start, datetime) else start
        last = day
        if end is not None:
            # النهاية غير مشمولة؛ مناسبة تنتهي 00:00 تبقى في يوم بدايتها
            last = max(day, (end(item) - timedelta(microseconds=1)).date())
        while day <= last:
            grouped[day].append(item)
            day += timedelta(days=1)
    return dict(grouped)


def weekday_names(lang: str) -> List[str]:
    names = lookup(lang, "calendar.weekdays_short", None)
    if isinstance(names, list) and len(names) == 7:
        return names
    return ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
