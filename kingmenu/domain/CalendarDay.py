from datetime import date
from typing import Any, Dict, List, Optional
from kingmenu.domain.MealPlanEntry import MealPlanEntry
from kingmenu.utilities.constants import ISO_DATE_FORMAT


class CalendarDay:
    def __init__(self, date: date, meals: Optional[List[MealPlanEntry]] = None,
                 is_today: bool = False, is_current_month: bool = False):
        self.date = date
        self.meals = meals[:] if meals else []
        self.is_today = is_today
        self.is_current_month = is_current_month

    def __str__(self) -> str:
        return f"{self.date.strftime(ISO_DATE_FORMAT)} ({len(self.meals)} meals)"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.strftime(ISO_DATE_FORMAT),
            "meals": [m.to_dict() for m in self.meals],
            "is_today": self.is_today,
            "is_current_month": self.is_current_month,
        }
