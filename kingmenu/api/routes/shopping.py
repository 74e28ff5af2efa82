import logging

from fastapi import APIRouter, HTTPException

from kingmenu.api.state import get_state
from kingmenu.logic.reporting.plan_stats import compute_selection_totals
from kingmenu.logic.shopping.list_builder import split_by_ownership
from kingmenu.utilities.validators import OwnedFlagInput, SelectionRequest

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])
logger = logging.getLogger(__name__)


def _list_payload():
    items = get_state().shopping_list.get_items()
    to_buy, owned = split_by_ownership(items)
    return {
        "items": [e.to_dict() for e in items],
        "to_buy": [e.to_dict() for e in to_buy],
        "owned": [e.to_dict() for e in owned],
        "count": len(items),
    }


@router.get("")
def get_shopping_list():
    """Consolidated shopping list for the current selection."""
    return _list_payload()


@router.delete("")
def clear_shopping_list():
    get_state().shopping_list.clear()
    logger.info("Selection cleared")
    return _list_payload()


@router.get("/selection")
def get_selection():
    dishes = get_state().shopping_list.get_dishes()
    return {
        "dishes": [d.to_dict() for d in dishes],
        "totals": compute_selection_totals(dishes),
    }


@router.post("/dishes")
def select_dish(req: SelectionRequest):
    state = get_state()
    dish = state.get_dish(req.dish_id)
    if dish is None:
        raise HTTPException(status_code=404, detail="Dish not found")
    try:
        state.shopping_list.add_dish(dish)
    except ValueError:
        raise HTTPException(status_code=400, detail="Dish already selected")
    logger.info("Selected dish %s", dish.title)
    return _list_payload()


@router.delete("/dishes/{dish_id}")
def unselect_dish(dish_id: str):
    try:
        dish = get_state().shopping_list.remove_dish(dish_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Dish not selected")
    logger.info("Unselected dish %s", dish.title)
    return _list_payload()


@router.post("/items/{entry_id}/owned")
def set_item_owned(entry_id: str, payload: OwnedFlagInput):
    try:
        entry = get_state().shopping_list.set_owned(entry_id, payload.owned)
    except ValueError:
        raise HTTPException(status_code=404, detail="Shopping list item not found")
    return entry.to_dict()


@router.post("/items/{entry_id}/toggle")
def toggle_item_owned(entry_id: str):
    try:
        entry = get_state().shopping_list.toggle_owned(entry_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Shopping list item not found")
    return entry.to_dict()
