"""Shopping list consolidation.

Merges the ingredient lists of the selected dishes into one list with a single
entry per normalized ingredient name. Provides
consolidate(selected_dishes, owned_keys=None, *, normalize=normalize_key).

Ownership flags are not remembered here: the caller keeps the set of owned
keys and passes it back in on every regeneration, so adding or removing a
dish recomputes amounts without losing what the user already ticked off.
"""
import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from kingmenu.domain.Dish import Dish
from kingmenu.domain.Ingredient import to_ingredient
from kingmenu.domain.ShoppingListEntry import ShoppingListEntry
from kingmenu.logic.ingredients.amounts import amount_or_zero, format_amount
from kingmenu.logic.ingredients.keys import Normalizer, is_matchable, name_of, normalize_key

__all__ = [
    "consolidate", "set_owned", "toggle_owned", "owned_keys_from",
    "split_by_ownership", "find_dish_by_ingredient",
]

logger = logging.getLogger(__name__)


def consolidate(selected_dishes: Iterable[Dish], owned_keys: Optional[Iterable[str]] = None, *,
                normalize: Normalizer = normalize_key) -> List[ShoppingListEntry]:
    """Build the consolidated shopping list for the selected dishes.

    Args:
        selected_dishes: Dish records in selection order.
        owned_keys: normalized names the user has marked as owned.
        normalize: key function used to merge ingredient names.

    Returns:
        One ShoppingListEntry per distinct key, in first-occurrence order.
        The first occurrence supplies id, display name, unit, category and
        provenance; later ones only add their numeric amount (non-numeric
        amounts count as 0, units are never converted). A key seen once keeps
        its amount string unchanged.
    """
    owned = set(owned_keys or ())
    entries: Dict[str, ShoppingListEntry] = {}
    totals: Dict[str, float] = {}
    merged: Set[str] = set()

    for dish in selected_dishes or []:
        for record in getattr(dish, "ingredients", None) or []:
            if not is_matchable(name_of(record)):
                logger.debug("Skipping ingredient without a usable name in dish %r", getattr(dish, "title", ""))
                continue
            ing = to_ingredient(record)
            key = normalize(ing.name)
            if key not in entries:
                entries[key] = ShoppingListEntry(
                    id=ing.id or f"item-{key}",
                    name=ing.name,
                    amount=ing.amount,
                    unit=ing.unit,
                    category=ing.category,
                    is_optional=ing.is_optional,
                    is_owned=key in owned,
                    dish_id=getattr(dish, "id", ""),
                    dish_title=getattr(dish, "title", ""),
                )
                totals[key] = amount_or_zero(ing.amount)
            else:
                totals[key] += amount_or_zero(ing.amount)
                merged.add(key)

    for key in merged:
        entries[key].amount = format_amount(totals[key])

    return list(entries.values())


def owned_keys_from(entries: Iterable[ShoppingListEntry], *,
                    normalize: Normalizer = normalize_key) -> Set[str]:
    """Collect the keys of owned entries, to feed back into consolidate()."""
    return {normalize(e.name) for e in entries if e.is_owned and is_matchable(e.name)}


def set_owned(entries: List[ShoppingListEntry], entry_id: str, owned: bool = True,
              owned_keys: Optional[Iterable[str]] = None, *,
              normalize: Normalizer = normalize_key) -> Tuple[List[ShoppingListEntry], Set[str]]:
    """Mark one entry (by id) as owned or not. Idempotent.

    Returns the new entry list and the new owned-key set; an unknown id
    returns both unchanged.
    """
    keys = set(owned_keys) if owned_keys is not None else owned_keys_from(entries, normalize=normalize)
    target = next((e for e in entries if e.id == entry_id), None)
    if target is None:
        return list(entries), keys
    key = normalize(target.name)
    if owned:
        keys.add(key)
    else:
        keys.discard(key)
    updated = [e.with_owned(owned) if e is target else e for e in entries]
    return updated, keys


def toggle_owned(entries: List[ShoppingListEntry], entry_id: str,
                 owned_keys: Optional[Iterable[str]] = None, *,
                 normalize: Normalizer = normalize_key) -> Tuple[List[ShoppingListEntry], Set[str]]:
    target = next((e for e in entries if e.id == entry_id), None)
    if target is None:
        keys = set(owned_keys) if owned_keys is not None else owned_keys_from(entries, normalize=normalize)
        return list(entries), keys
    return set_owned(entries, entry_id, not target.is_owned, owned_keys, normalize=normalize)


def split_by_ownership(entries: Iterable[ShoppingListEntry]) -> Tuple[List[ShoppingListEntry], List[ShoppingListEntry]]:
    """Split into (to_buy, owned), each keeping list order."""
    to_buy, have = [], []
    for e in entries:
        (have if e.is_owned else to_buy).append(e)
    return to_buy, have


def find_dish_by_ingredient(selected_dishes: Iterable[Dish], ingredient_name: str, *,
                            normalize: Normalizer = normalize_key) -> Optional[Dish]:
    """First selected dish that uses the ingredient, or None."""
    if not is_matchable(ingredient_name):
        return None
    key = normalize(ingredient_name)
    for dish in selected_dishes or []:
        for ing in getattr(dish, "ingredients", None) or []:
            name = name_of(ing)
            if is_matchable(name) and normalize(name) == key:
                return dish
    return None
