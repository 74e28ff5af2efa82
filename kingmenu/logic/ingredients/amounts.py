"""Amount parsing helpers.

Ingredient amounts travel as display strings ("400", "1.5", "2 cloves",
"to taste"). Only the leading decimal number is read, so a malformed amount
degrades to a missing quantity instead of raising.
"""
import math
import re
from typing import Any, Optional

__all__ = ["parse_amount", "amount_or_zero", "format_amount"]

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_amount(value: Any) -> Optional[float]:
    """Return the leading number of an amount, or None if there is none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    elif isinstance(value, str):
        m = _LEADING_NUMBER.match(value)
        if not m:
            return None
        parsed = float(m.group(1))
    else:
        return None
    return parsed if math.isfinite(parsed) else None


def amount_or_zero(value: Any) -> float:
    parsed = parse_amount(value)
    return parsed if parsed is not None else 0.0


def format_amount(total: float) -> str:
    """Format a summed amount: "3" for integral totals, else the plain decimal sum.

    Only float noise past the 10th decimal is dropped ("0.1" + "0.2" -> "0.3").
    """
    rounded = round(total, 10)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.10f}".rstrip("0").rstrip(".")
