import logging
from datetime import date as _date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from kingmenu.api.state import get_state
from kingmenu.domain.MealPlanEntry import MealPlanEntry
from kingmenu.logic.calendar.month_grid import build_month_grid, group_by_meal_type, range_grouping
from kingmenu.logic.reporting.plan_stats import compute_meal_plan_stats, upcoming_meals
from kingmenu.utilities.config import DEFAULT_USER_ID, UPCOMING_LIMIT, UPCOMING_WINDOW_DAYS
from kingmenu.utilities.constants import ISO_DATE_FORMAT
from kingmenu.utilities.validators import MealPlanEntryInput

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])
logger = logging.getLogger(__name__)


def _entry_from_input(payload: MealPlanEntryInput, entry_id: str = "") -> MealPlanEntry:
    dish = get_state().get_dish(payload.dish_id)
    if dish is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return MealPlanEntry(
        id=entry_id,
        user_id=payload.user_id or DEFAULT_USER_ID,
        date=payload.date,
        meal_type=payload.meal_type,
        dish=dish,
        servings=payload.servings,
        notes=payload.notes,
    )


@router.get("")
def list_entries():
    return get_state().meal_plan.to_dict()


@router.post("", status_code=201)
def schedule_dish(payload: MealPlanEntryInput):
    entry = get_state().meal_plan.add(_entry_from_input(payload))
    logger.info("Scheduled %s", entry)
    return entry.to_dict()


@router.get("/calendar")
def get_calendar(year: Optional[int] = Query(default=None, ge=1, le=9999),
                 month: Optional[int] = Query(default=None, ge=1, le=12)):
    """Month view: always 42 cells starting on a Sunday."""
    today = _date.today()
    anchor = _date(year or today.year, month or today.month, 1)
    cells = build_month_grid(anchor, get_state().meal_plan.get_entries(), today=today)
    return {
        "year": anchor.year,
        "month": anchor.month,
        "days": [c.to_dict() for c in cells],
    }


@router.get("/range")
def get_range(start: str = Query(...), end: str = Query(...)):
    """Meals grouped per day over [start, end]; an invalid range yields an empty list."""
    grouped = range_grouping(start, end, get_state().meal_plan.get_entries())
    return [
        {
            "date": day.strftime(ISO_DATE_FORMAT),
            "meals": [e.to_dict() for e in meals],
            "by_meal_type": {
                slot: [e.to_dict() for e in slot_meals]
                for slot, slot_meals in group_by_meal_type(meals).items()
            },
        }
        for day, meals in grouped.items()
    ]


@router.get("/stats")
def get_stats():
    entries = get_state().meal_plan.get_entries()
    upcoming = upcoming_meals(entries, days=UPCOMING_WINDOW_DAYS, limit=UPCOMING_LIMIT)
    return {
        "stats": compute_meal_plan_stats(entries),
        "upcoming": [e.to_dict() for e in upcoming],
    }


@router.get("/{entry_id}")
def get_entry(entry_id: str):
    entry = get_state().meal_plan.get(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Meal plan entry not found")
    return entry.to_dict()


@router.put("/{entry_id}")
def update_entry(entry_id: str, payload: MealPlanEntryInput):
    """Replace the whole entry; created_at of the stored entry is kept."""
    plan = get_state().meal_plan
    existing = plan.get(entry_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Meal plan entry not found")
    entry = _entry_from_input(payload, entry_id)
    entry.created_at = existing.created_at
    plan.update(entry)
    logger.info("Updated meal plan entry %s", entry_id)
    return entry.to_dict()


@router.delete("/{entry_id}")
def delete_entry(entry_id: str):
    try:
        get_state().meal_plan.remove(entry_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Meal plan entry not found")
    logger.info("Removed meal plan entry %s", entry_id)
    return {"status": "deleted", "id": entry_id}
