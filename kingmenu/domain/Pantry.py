"""Pantry aggregate: the ingredients the user has declared as owned."""
import logging
from typing import List
from uuid import uuid4
from kingmenu.domain.OwnedIngredient import OwnedIngredient
from kingmenu.events.Event_Bus import GLOBAL_EVENT_BUS
from kingmenu.events.event_helpers import publish_pantry_changed

logger = logging.getLogger(__name__)


class Pantry:
    def __init__(self):
        self.items: List[OwnedIngredient] = []
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def add_item(self, item: OwnedIngredient) -> OwnedIngredient:
        '''
        Adds an owned ingredient; items without an id get a fresh one.
        '''
        if not item.id:
            item.id = f"owned-{uuid4().hex}"
        self.items.append(item)
        publish_pantry_changed("added", item.name, len(self.items), bus=self._event_bus)
        return item

    def remove_item(self, item_id: str) -> OwnedIngredient:
        '''
        Removes the owned ingredient with the given id.
        Raises ValueError when no such item exists.
        '''
        for item in self.items:
            if item.id == item_id:
                self.items.remove(item)
                publish_pantry_changed("removed", item.name, len(self.items), bus=self._event_bus)
                return item
        raise ValueError(f"Ingredient '{item_id}' not found in pantry.")

    def clear(self):
        self.items = []
        publish_pantry_changed("cleared", "", 0, bus=self._event_bus)
        return self

    def get_items(self):
        '''
        Returns the list of owned ingredients.
        '''
        return self.items

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Items:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def from_dict(self, data):
        '''
        Populates the Pantry from a list of dictionaries.
        '''
        for item_data in data or []:
            if not isinstance(item_data, dict):
                logger.warning("Skipping pantry record that is not an object: %r", item_data)
                continue
            self.add_item(OwnedIngredient.from_dict(item_data))
        return self

    def to_dict(self):
        '''
        Converts the Pantry to a list of dictionaries.
        '''
        return [item.to_dict() for item in self.items]
