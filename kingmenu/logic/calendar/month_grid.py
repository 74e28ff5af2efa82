"""Meal plan calendar helpers.

build_month_grid lays a month out as a fixed 6x7 grid starting on Sunday,
padded with days of the neighbouring months. range_grouping buckets entries
for every day of an inclusive date range (the print view).
"""
from __future__ import annotations

import calendar
import logging
from collections import OrderedDict, defaultdict
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from kingmenu.domain.CalendarDay import CalendarDay
from kingmenu.domain.MealPlanEntry import MealPlanEntry, to_calendar_date
from kingmenu.utilities.constants import CALENDAR_CELLS, DAYS_PER_WEEK

__all__ = [
    "build_month_grid", "range_grouping", "shift_month",
    "group_by_meal_type", "group_dates_by_week", "sunday_weekday",
]

logger = logging.getLogger(__name__)


def sunday_weekday(day: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (day.weekday() + 1) % DAYS_PER_WEEK


def _entries_by_date(entries: Iterable[MealPlanEntry]) -> Dict[date, List[MealPlanEntry]]:
    buckets: Dict[date, List[MealPlanEntry]] = defaultdict(list)
    for entry in entries or []:
        day = to_calendar_date(getattr(entry, "date", None))
        if day is None:
            logger.debug("Entry %r has no usable date, left out of the calendar", getattr(entry, "id", None))
            continue
        buckets[day].append(entry)
    return buckets


def build_month_grid(month_anchor: Any, entries: Iterable[MealPlanEntry], *,
                     today: Optional[date] = None) -> List[CalendarDay]:
    """Return the 42 calendar cells for the month containing month_anchor.

    Args:
        month_anchor: any date (or ISO string) inside the month to show.
        entries: meal plan entries; each cell gets those on its date, in input order.
        today: date flagged as is_today, defaults to date.today().

    Returns:
        A list of exactly 42 CalendarDay cells. Leading cells come from the
        previous month so the grid starts on a Sunday, trailing cells from the
        next month fill up the rest.
    """
    anchor = to_calendar_date(month_anchor) or date.today()
    today = today if today is not None else date.today()
    first = anchor.replace(day=1)
    _, days_in_month = calendar.monthrange(first.year, first.month)
    by_date = _entries_by_date(entries)

    start = first - timedelta(days=sunday_weekday(first))
    cells: List[CalendarDay] = []
    for offset in range(CALENDAR_CELLS):
        day = start + timedelta(days=offset)
        in_month = day.year == first.year and day.month == first.month
        cells.append(CalendarDay(
            date=day,
            meals=by_date.get(day, []),
            is_today=in_month and day == today,
            is_current_month=in_month,
        ))
    logger.debug("Built grid for %s-%02d (%d days, %d leading)",
                 first.year, first.month, days_in_month, sunday_weekday(first))
    return cells


def range_grouping(start: Any, end: Any, entries: Iterable[MealPlanEntry]) -> "OrderedDict[date, List[MealPlanEntry]]":
    """Group entries by day for every date in [start, end].

    Empty days are kept. Unparseable bounds or start > end give an empty mapping.
    """
    first, last = to_calendar_date(start), to_calendar_date(end)
    grouped: "OrderedDict[date, List[MealPlanEntry]]" = OrderedDict()
    if first is None or last is None or first > last:
        return grouped
    by_date = _entries_by_date(entries)
    day = first
    while day <= last:
        grouped[day] = list(by_date.get(day, []))
        day += timedelta(days=1)
    return grouped


def shift_month(anchor: Any, delta: int) -> date:
    """First day of the month delta months away from anchor (negative goes back)."""
    base = to_calendar_date(anchor) or date.today()
    index = base.year * 12 + (base.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)


def group_by_meal_type(entries: Iterable[MealPlanEntry]) -> "OrderedDict[str, List[MealPlanEntry]]":
    grouped: "OrderedDict[str, List[MealPlanEntry]]" = OrderedDict()
    for entry in entries or []:
        grouped.setdefault(entry.meal_type, []).append(entry)
    return grouped


def group_dates_by_week(dates: Iterable[date]) -> List[List[date]]:
    """Split consecutive dates into weeks; a week closes after each Sunday."""
    weeks: List[List[date]] = []
    current: List[date] = []
    for day in dates:
        current.append(day)
        if sunday_weekday(day) == 0:
            weeks.append(current)
            current = []
    if current:
        weeks.append(current)
    return weeks
