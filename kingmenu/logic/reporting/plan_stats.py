"""Meal plan and selection summaries shown on the plan page and selection panel."""
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional

from kingmenu.domain.Dish import Dish
from kingmenu.domain.MealPlanEntry import MealPlanEntry, to_calendar_date


def _int_or_zero(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def compute_meal_plan_stats(entries: Iterable[MealPlanEntry]) -> Dict[str, int]:
    """Totals over a set of planned meals.

    Returns:
        {'total_meals', 'unique_dishes', 'total_cooking_time', 'total_servings'}
        where cooking time is summed once per planned meal (not per serving).
    """
    entries = list(entries or [])
    return {
        "total_meals": len(entries),
        "unique_dishes": len({e.dish.id for e in entries}),
        "total_cooking_time": sum(_int_or_zero(e.dish.cooking_time) for e in entries),
        "total_servings": sum(_int_or_zero(e.servings) for e in entries),
    }


def upcoming_meals(entries: Iterable[MealPlanEntry], *, today: Optional[date] = None,
                   days: int = 7, limit: int = 10) -> List[MealPlanEntry]:
    """Entries dated between today and today + days (inclusive), earliest first."""
    today = today if today is not None else date.today()
    horizon = today + timedelta(days=days)
    dated = []
    for entry in entries or []:
        day = to_calendar_date(entry.date)
        if day is not None and today <= day <= horizon:
            dated.append((day, entry))
    dated.sort(key=lambda pair: pair[0])
    return [entry for _, entry in dated[:max(limit, 0)]]


def compute_selection_totals(dishes: Iterable[Dish]) -> Dict[str, int]:
    dishes = list(dishes or [])
    return {
        "count": len(dishes),
        "total_cooking_time": sum(_int_or_zero(d.cooking_time) for d in dishes),
        "total_servings": sum(_int_or_zero(d.servings) for d in dishes),
    }


__all__ = ["compute_meal_plan_stats", "upcoming_meals", "compute_selection_totals"]
