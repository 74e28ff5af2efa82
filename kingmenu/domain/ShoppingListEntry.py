from typing import Any, Dict
from kingmenu.domain.Ingredient import Ingredient


class ShoppingListEntry(Ingredient):
    def __init__(self, id: str = "", name: Any = "", amount: Any = "", unit: str = "",
                 category: str = "", is_optional: bool = False, is_owned: bool = False,
                 dish_id: str = "", dish_title: str = ""):
        super().__init__(id, name, amount, unit, category, is_optional)
        self.is_owned = is_owned
        self.dish_id = dish_id
        self.dish_title = dish_title

    def __str__(self) -> str:
        mark = "x" if self.is_owned else " "
        return f"[{mark}] {super().__str__()} ({self.dish_title})"

    __repr__ = __str__

    def with_owned(self, owned: bool) -> "ShoppingListEntry":
        '''Returns a copy carrying the given ownership flag.'''
        copy = ShoppingListEntry.from_dict(self.to_dict())
        copy.is_owned = bool(owned)
        return copy

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        base = Ingredient.from_dict(d)
        return ShoppingListEntry(
            base.id, base.name, base.amount, base.unit, base.category, base.is_optional,
            is_owned=bool(d.get("is_owned", d.get("isOwned", False))),
            dish_id=str(d.get("dish_id", d.get("dishId", "")) or ""),
            dish_title=d.get("dish_title", d.get("dishTitle", "")) or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "is_owned": self.is_owned,
            "dish_id": self.dish_id,
            "dish_title": self.dish_title,
        })
        return d
