import json
import logging
from kingmenu.domain.Dish import Dish
from kingmenu.infra.paths import DISHES_FILE

logger = logging.getLogger(__name__)

def reading_from_dishes(path=DISHES_FILE):
    """Read the dish catalog from a JSON file with proper error handling."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            dishes_data = json.load(f)
        if not isinstance(dishes_data, list):
            logger.error(f"Dishes file {path} does not contain a list.")
            return []
        return [Dish.from_dict(entry) for entry in dishes_data if isinstance(entry, dict)]
    except FileNotFoundError:
        logger.warning(f"Dishes file not found: {path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in dishes file: {e}")
        return []
    except OSError as e:
        logger.error(f"Error reading dishes: {e}")
        return []


def find_dish(dishes, dish_id):
    """Return the dish with the given id, or None."""
    return next((d for d in dishes if d.id == dish_id), None)
