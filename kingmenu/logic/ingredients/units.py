"""Measurement conversion for recipe display.

Volumes are expressed in millilitres and weights in grams before converting;
the imperial table only changes the size of cup/tbsp/tsp. Unknown unit pairs
are returned unchanged. Shopping list consolidation never converts units.
"""
from typing import Dict, Final, List

__all__ = ["convert_measurement", "format_measurement", "preferred_units", "MEASUREMENT_SYSTEMS"]

MEASUREMENT_SYSTEMS: Final[Dict[str, Dict[str, Dict[str, float]]]] = {
    "metric": {
        "volume": {"ml": 1, "l": 1000, "cup": 250, "tbsp": 15, "tsp": 5},
        "weight": {"g": 1, "kg": 1000, "oz": 28.35, "lb": 453.59},
    },
    "imperial": {
        "volume": {"ml": 1, "l": 1000, "cup": 236.59, "tbsp": 14.79, "tsp": 4.93},
        "weight": {"g": 1, "kg": 1000, "oz": 28.35, "lb": 453.59},
    },
}


def convert_measurement(value: float, from_unit: str, to_unit: str, system: str = "metric") -> float:
    """Convert value between two units of the same family.

    >>> convert_measurement(1, "kg", "g")
    1000.0
    >>> convert_measurement(100, "celsius", "fahrenheit")
    212.0
    """
    tables = MEASUREMENT_SYSTEMS.get(system, MEASUREMENT_SYSTEMS["metric"])
    for family in ("volume", "weight"):
        table = tables[family]
        if from_unit in table and to_unit in table:
            return value * table[from_unit] / table[to_unit]
    if from_unit == "celsius" and to_unit == "fahrenheit":
        return value * 9 / 5 + 32
    if from_unit == "fahrenheit" and to_unit == "celsius":
        return (value - 32) * 5 / 9
    return value


def format_measurement(value: float, unit: str) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {unit}"


def preferred_units(locale: str) -> Dict[str, object]:
    """Units to offer for a locale; only en-US gets imperial."""
    imperial = locale.startswith("en-US")
    volume: List[str] = ["cup", "tbsp", "tsp", "fl oz"] if imperial else ["ml", "l", "tbsp", "tsp"]
    return {
        "volume": volume,
        "weight": ["oz", "lb"] if imperial else ["g", "kg"],
        "temperature": "fahrenheit" if imperial else "celsius",
    }
