"""OwnedIngredient domain entity: a user-declared "I have this" record, independent of any dish."""
from datetime import date, datetime
from typing import Any, Dict, Optional
from kingmenu.utilities.constants import ISO_DATE_FORMAT


class OwnedIngredient:
    def __init__(self, id: str = "", name: Any = "", quantity: float = 0, unit: str = "",
                 category: str = "", expiry_date: Optional[date] = None):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.expiry_date = expiry_date

    def __str__(self) -> str:
        parts = [f"{self.name} - {self.quantity} {self.unit}".rstrip()]
        if self.expiry_date:
            parts.append(f"Exp: {self.expiry_date.strftime(ISO_DATE_FORMAT)}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an OwnedIngredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        if "expiryDate" in d and "expiry_date" not in d:
            d["expiry_date"] = d.pop("expiryDate")
        exp = d.get("expiry_date")
        if exp and not isinstance(exp, date):
            try:
                d["expiry_date"] = datetime.strptime(str(exp)[:10], ISO_DATE_FORMAT).date()
            except ValueError:
                d["expiry_date"] = None
        elif isinstance(exp, datetime):
            d["expiry_date"] = exp.date()
        allowed = {"id", "name", "quantity", "unit", "category", "expiry_date"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        filtered["id"] = str(filtered.get("id") or "")
        filtered["unit"] = filtered.get("unit") or ""
        filtered["category"] = filtered.get("category") or ""
        filtered["expiry_date"] = filtered.get("expiry_date") or None
        filtered.setdefault("name", "")
        filtered.setdefault("quantity", 0)
        return OwnedIngredient(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "expiry_date": self.expiry_date.strftime(ISO_DATE_FORMAT) if self.expiry_date else None,
        }
