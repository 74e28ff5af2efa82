import logging

from fastapi import APIRouter, HTTPException

from kingmenu.api.state import get_state
from kingmenu.domain.OwnedIngredient import OwnedIngredient
from kingmenu.utilities.validators import OwnedIngredientInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])
logger = logging.getLogger(__name__)


@router.get("/ingredients")
def list_ingredients():
    return get_state().pantry.to_dict()


@router.post("/ingredients", status_code=201)
def add_ingredient(payload: OwnedIngredientInput):
    item = get_state().pantry.add_item(OwnedIngredient.from_dict(payload.model_dump()))
    logger.info("Pantry: added %s", item.name)
    return item.to_dict()


@router.delete("/ingredients/{item_id}")
def delete_ingredient(item_id: str):
    try:
        item = get_state().pantry.remove_item(item_id)
    except ValueError:
        raise HTTPException(status_code=404, detail="Ingredient not found")
    logger.info("Pantry: removed %s", item.name)
    return {"status": "deleted", "id": item_id}


@router.delete("/ingredients")
def clear_ingredients():
    get_state().pantry.clear()
    return {"status": "cleared"}
