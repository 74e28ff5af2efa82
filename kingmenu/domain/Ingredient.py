"""Ingredient domain entity: one line of a dish's ingredient list (name, amount, unit, category)."""
from typing import Any, Dict


class Ingredient:
    def __init__(self, id: str = "", name: Any = "", amount: Any = "", unit: str = "",
                 category: str = "", is_optional: bool = False):
        self.id = id
        # name and amount are kept as received; malformed values are handled by the engine
        self.name = name
        self.amount = amount
        self.unit = unit
        self.category = category
        self.is_optional = is_optional

    def __str__(self) -> str:
        return f"{self.name} - {self.amount} {self.unit}".rstrip()

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        if "isOptional" in d and "is_optional" not in d:
            d["is_optional"] = d.pop("isOptional")
        allowed = {"id", "name", "amount", "unit", "category", "is_optional"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["id"] = str(filtered.get("id") or "")
        filtered["unit"] = filtered.get("unit") or ""
        filtered["category"] = filtered.get("category") or ""
        filtered["is_optional"] = bool(filtered.get("is_optional", False))
        filtered.setdefault("name", "")
        filtered.setdefault("amount", "")
        return Ingredient(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        '''Converts the Ingredient object to a dictionary for JSON responses.'''
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
            "category": self.category,
            "is_optional": self.is_optional,
        }


def to_ingredient(record: Any) -> Ingredient:
    '''Returns record itself if it is an Ingredient, else an Ingredient built from it (plain dicts from raw catalogs).'''
    if isinstance(record, Ingredient):
        return record
    return Ingredient.from_dict(record)
