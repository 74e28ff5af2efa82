import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from kingmenu.api.state import get_state
from kingmenu.domain.OwnedIngredient import OwnedIngredient
from kingmenu.logic.matching.dish_matcher import filter_matches, match_dishes, summarize_matches
from kingmenu.utilities.validators import MatchRequest

router = APIRouter(prefix="/api/dishes", tags=["dishes"])
logger = logging.getLogger(__name__)


@router.get("")
def list_dishes():
    """Return the whole dish catalog."""
    return [d.to_dict() for d in get_state().dishes]


@router.post("/match")
def match(req: Optional[MatchRequest] = None):
    """Match owned ingredients against the catalog.

    When the body has no 'owned' list the pantry contents are used.
    """
    req = req or MatchRequest()
    state = get_state()
    if req.owned is None:
        owned = state.pantry.get_items()
    else:
        owned = [OwnedIngredient.from_dict(o.model_dump()) for o in req.owned]
    matches = match_dishes(owned, state.dishes)
    return {
        "summary": summarize_matches(matches),
        "matches": [m.to_dict() for m in filter_matches(matches, req.match_type)],
    }


@router.get("/{dish_id}")
def get_dish(dish_id: str):
    dish = get_state().get_dish(dish_id)
    if dish is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return dish.to_dict()


@router.get("/{dish_id}/scaled")
def get_scaled_ingredients(dish_id: str, servings: int = Query(..., ge=1, le=50)):
    """Ingredients of a dish rescaled to the requested number of servings."""
    dish = get_state().get_dish(dish_id)
    if dish is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    return {
        "dish_id": dish.id,
        "servings": servings,
        "ingredients": [i.to_dict() for i in dish.scaled_ingredients(servings)],
    }
