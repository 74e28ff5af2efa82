"""Dish domain entity: catalog record with ingredients, instructions and cooking metadata."""
from typing import Any, Dict, List, Optional
from kingmenu.domain.Ingredient import Ingredient
from kingmenu.logic.ingredients.amounts import parse_amount


class Dish:
    def __init__(self, id: str = "", title: str = "", ingredients: Optional[List[Ingredient]] = None,
                 instructions: Optional[List[str]] = None, cooking_time: int = 0, servings: int = 0,
                 cuisine: str = "", difficulty: str = "", image: str = "", calories: int = 0,
                 rating: float = 0, tags: Optional[List[str]] = None):
        self.id = id
        self.title = title
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.cooking_time = cooking_time
        self.servings = servings
        self.cuisine = cuisine
        self.difficulty = difficulty
        self.image = image
        self.calories = calories
        self.rating = rating
        self.tags = tags[:] if tags else []

    def __str__(self) -> str:
        return f"{self.title} - {self.cuisine} - {self.cooking_time}m - {self.servings} servings - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    def scaled_ingredients(self, servings: int) -> List[Ingredient]:
        """Return ingredient copies with amounts scaled from the dish's servings to `servings`.

        A missing amount counts as 1; an amount without a number is kept as is.
        """
        base = self.servings
        scaled = []
        for ing in self.ingredients:
            copy = Ingredient.from_dict(ing.to_dict())
            raw = ing.amount if ing.amount not in (None, "") else "1"
            value = parse_amount(raw)
            if value is not None and base:
                copy.amount = f"{value * servings / base:.2f}"
            scaled.append(copy)
        return scaled

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        aliases = {"cookingTime": "cooking_time"}
        for src, dst in aliases.items():
            if src in d and dst not in d:
                d[dst] = d.pop(src)
        allowed = {"id", "title", "ingredients", "instructions", "cooking_time", "servings",
                   "cuisine", "difficulty", "image", "calories", "rating", "tags"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["id"] = str(filtered.get("id") or "")
        raw_ingredients = filtered.get("ingredients")
        if not isinstance(raw_ingredients, list):
            raw_ingredients = []
        filtered["ingredients"] = [
            ing if isinstance(ing, Ingredient) else Ingredient.from_dict(ing)
            for ing in raw_ingredients
        ]
        return Dish(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "cooking_time": self.cooking_time,
            "servings": self.servings,
            "cuisine": self.cuisine,
            "difficulty": self.difficulty,
            "image": self.image,
            "calories": self.calories,
            "rating": self.rating,
            "tags": self.tags,
        }
