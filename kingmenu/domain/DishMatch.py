"""DishMatch: derived result of matching owned ingredients against one dish."""
from typing import Any, Dict, List, Optional
from kingmenu.domain.Dish import Dish
from kingmenu.domain.Ingredient import Ingredient


class DishMatch:
    def __init__(self, dish: Dish, compatibility_score: float, match_type: str,
                 available_ingredients: Optional[List[Ingredient]] = None,
                 missing_ingredients: Optional[List[Ingredient]] = None):
        self.dish = dish
        self.compatibility_score = compatibility_score
        self.match_type = match_type
        self.available_ingredients = available_ingredients[:] if available_ingredients else []
        self.missing_ingredients = missing_ingredients[:] if missing_ingredients else []

    def __str__(self) -> str:
        return f"{self.dish.title} - {self.compatibility_score:.0f}% ({self.match_type})"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dish": self.dish.to_dict(),
            "compatibility_score": self.compatibility_score,
            "match_type": self.match_type,
            "available_ingredients": [i.to_dict() for i in self.available_ingredients],
            "missing_ingredients": [i.to_dict() for i in self.missing_ingredients],
        }
