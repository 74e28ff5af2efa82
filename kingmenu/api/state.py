"""In-process application state shared by the API routers.

One holder per process: the dish catalog, the pantry, the shopping list
(selection + ownership ticks) and the meal plan. Tests call reset_state()
to start from a clean slate.
"""
import logging
from typing import List, Optional

from kingmenu.domain.Dish import Dish
from kingmenu.domain.MealPlan import MealPlan
from kingmenu.domain.Pantry import Pantry
from kingmenu.domain.ShoppingList import ShoppingList
from kingmenu.infra.Dish_Repository import find_dish, reading_from_dishes

logger = logging.getLogger(__name__)


class AppState:
    def __init__(self, dishes: Optional[List[Dish]] = None):
        self.dishes: List[Dish] = reading_from_dishes() if dishes is None else list(dishes)
        self.pantry = Pantry()
        self.shopping_list = ShoppingList()
        self.meal_plan = MealPlan()
        logger.info("Application state ready with %d dishes", len(self.dishes))

    def get_dish(self, dish_id: str) -> Optional[Dish]:
        return find_dish(self.dishes, dish_id)


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState()
    return _state


def reset_state(dishes: Optional[List[Dish]] = None) -> AppState:
    """Replace the state holder (used by tests and on startup)."""
    global _state
    _state = AppState(dishes)
    return _state
