"""MealPlanEntry domain entity: one dish scheduled on a calendar date in a meal slot."""
from datetime import date, datetime
from typing import Any, Dict, Optional
from kingmenu.domain.Dish import Dish
from kingmenu.utilities.constants import ISO_DATE_FORMAT, DEFAULT_MEAL_TYPE


def to_calendar_date(value: Any) -> Optional[date]:
    '''Coerces a date, datetime or ISO "YYYY-MM-DD" string to a date; None when it cannot.'''
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip()[:10], ISO_DATE_FORMAT).date()
        except ValueError:
            return None
    return None


class MealPlanEntry:
    def __init__(self, id: str = "", user_id: str = "", date: Optional[date] = None,
                 meal_type: str = DEFAULT_MEAL_TYPE, dish: Optional[Dish] = None, servings: int = 0,
                 notes: Optional[str] = None, created_at: str = ""):
        self.id = id
        self.user_id = user_id
        self.date = date
        self.meal_type = meal_type
        self.dish = dish if dish is not None else Dish()
        self.servings = servings
        self.notes = notes
        self.created_at = created_at or datetime.now().isoformat()

    def __str__(self) -> str:
        day = self.date.strftime(ISO_DATE_FORMAT) if self.date else "?"
        return f"{day} {self.meal_type}: {self.dish.title} ({self.servings}p)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        aliases = {"userId": "user_id", "mealType": "meal_type", "createdAt": "created_at"}
        for src, dst in aliases.items():
            if src in d and dst not in d:
                d[dst] = d.pop(src)
        dish = d.get("dish")
        return MealPlanEntry(
            id=str(d.get("id") or ""),
            user_id=str(d.get("user_id") or ""),
            date=to_calendar_date(d.get("date")),
            meal_type=d.get("meal_type") or DEFAULT_MEAL_TYPE,
            dish=dish if isinstance(dish, Dish) else Dish.from_dict(dish),
            servings=d.get("servings") or 0,
            notes=d.get("notes") or None,
            created_at=d.get("created_at") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date.strftime(ISO_DATE_FORMAT) if self.date else None,
            "meal_type": self.meal_type,
            "dish": self.dish.to_dict(),
            "servings": self.servings,
            "notes": self.notes,
            "created_at": self.created_at,
        }
