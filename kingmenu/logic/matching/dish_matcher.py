"""Dish match engine.

Scores every catalog dish by the share of its ingredients the user already
owns and classifies it into a match tier:

    score = available / total * 100    (0 for a dish without ingredients)
    score == 100 -> perfect, score >= 70 -> near, score >= 30 -> creative

Dishes under 30 are dropped. Results are sorted by score, highest first;
ties keep catalog order. Malformed records never raise: an ingredient without
a string name is simply missing.
"""
import logging
from typing import Dict, Iterable, List, Optional, Set

from kingmenu.domain.Dish import Dish
from kingmenu.domain.DishMatch import DishMatch
from kingmenu.domain.Ingredient import to_ingredient
from kingmenu.domain.OwnedIngredient import OwnedIngredient
from kingmenu.logic.ingredients.keys import Normalizer, is_matchable, name_of, normalize_key
from kingmenu.utilities.constants import (
    MATCH_THRESHOLD, NEAR_MATCH_THRESHOLD, PERFECT_SCORE,
    MATCH_PERFECT, MATCH_NEAR, MATCH_CREATIVE, MATCH_TYPES,
)

__all__ = ["match_dishes", "classify_score", "owned_keys", "summarize_matches", "filter_matches"]

logger = logging.getLogger(__name__)


def classify_score(score: float) -> str:
    """Map a compatibility score to its tier (perfect / near / creative)."""
    if score == PERFECT_SCORE:
        return MATCH_PERFECT
    if score >= NEAR_MATCH_THRESHOLD:
        return MATCH_NEAR
    return MATCH_CREATIVE


def owned_keys(owned: Iterable[OwnedIngredient], *, normalize: Normalizer = normalize_key) -> Set[str]:
    keys: Set[str] = set()
    for item in owned or []:
        name = name_of(item)
        if is_matchable(name):
            keys.add(normalize(name))
    return keys


def _match_one(dish: Dish, have: Set[str], normalize: Normalizer) -> Optional[DishMatch]:
    ingredients = list(getattr(dish, "ingredients", None) or [])
    available, missing = [], []
    for ing in ingredients:
        name = name_of(ing)
        if is_matchable(name) and normalize(name) in have:
            available.append(to_ingredient(ing))
        else:
            missing.append(to_ingredient(ing))
    # multiply first so tier boundaries (70, 100) are hit exactly
    score = len(available) * 100 / len(ingredients) if ingredients else 0
    logger.debug("Dish %r: score=%.1f available=%d missing=%d",
                 getattr(dish, "title", ""), score, len(available), len(missing))
    if score < MATCH_THRESHOLD:
        return None
    return DishMatch(dish, score, classify_score(score), available, missing)


def match_dishes(owned: Iterable[OwnedIngredient], catalog: Iterable[Dish], *,
                 normalize: Normalizer = normalize_key) -> List[DishMatch]:
    """Return the dishes reachable with the owned ingredients, best match first.

    Args:
        owned: OwnedIngredient records (anything with a ``name``).
        catalog: Dish records, in catalog order.
        normalize: key function used to compare ingredient names.

    Returns:
        DishMatch list sorted by compatibility_score descending (stable).
    """
    have = owned_keys(owned, normalize=normalize)
    matches: List[DishMatch] = []
    for dish in catalog or []:
        match = _match_one(dish, have, normalize)
        if match is not None:
            matches.append(match)
    # list.sort is stable, so equal scores keep catalog order
    matches.sort(key=lambda m: m.compatibility_score, reverse=True)
    return matches


def summarize_matches(matches: Iterable[DishMatch]) -> Dict[str, int]:
    """Count matches per tier: {total, perfect, near, creative}."""
    summary = {"total": 0}
    summary.update({t: 0 for t in MATCH_TYPES})
    for m in matches:
        summary["total"] += 1
        if m.match_type in summary:
            summary[m.match_type] += 1
    return summary


def filter_matches(matches: Iterable[DishMatch], match_type: str = "all") -> List[DishMatch]:
    """Keep matches of one tier; 'all' keeps everything."""
    if match_type == "all":
        return list(matches)
    return [m for m in matches if m.match_type == match_type]
