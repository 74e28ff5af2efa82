"""Ingredient key normalization.

Dish catalogs and owned-ingredient records come from different input paths
(catalog selection, manual entry) and share no foreign key, so ingredients are
identified by their display name. Two ingredients are the same iff their
normalized keys are equal.
"""
from typing import Any, Callable

__all__ = ["normalize_key", "is_matchable", "name_of", "Normalizer"]

Normalizer = Callable[[str], str]


def normalize_key(name: Any) -> str:
    """Case-fold an ingredient name into its matching/aggregation key.

    Only the case changes: no trimming, stemming or unit handling, so
    "Tomato" and "Tomatoes" stay distinct. Non-string names give "".
    """
    if not isinstance(name, str):
        return ""
    return name.lower()


def is_matchable(name: Any) -> bool:
    """Only string names take part in matching or aggregation."""
    return isinstance(name, str)


def name_of(record: Any) -> Any:
    """Read the display name of an ingredient record (object or plain dict)."""
    if isinstance(record, dict):
        return record.get("name")
    return getattr(record, "name", None)
