"""ShoppingList aggregate: the selected dishes and the consolidated list built from them.

Ownership ticks are stored as a set of normalized ingredient keys, so they
survive regenerating the list after the selection changes.
"""
import logging
from typing import List, Optional, Set
from kingmenu.domain.Dish import Dish
from kingmenu.domain.ShoppingListEntry import ShoppingListEntry
from kingmenu.events.Event_Bus import GLOBAL_EVENT_BUS
from kingmenu.events.event_helpers import publish_owned_changed, publish_selection_changed
from kingmenu.logic.ingredients.keys import Normalizer, normalize_key
from kingmenu.logic.shopping import list_builder

logger = logging.getLogger(__name__)


class ShoppingList:
    def __init__(self, normalize: Normalizer = normalize_key):
        self.dishes: List[Dish] = []
        self.owned_keys: Set[str] = set()
        self._normalize = normalize
        self._entries: List[ShoppingListEntry] = []
        self._event_bus = GLOBAL_EVENT_BUS

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def _regenerate(self):
        self._entries = list_builder.consolidate(self.dishes, self.owned_keys, normalize=self._normalize)

    def has_dish(self, dish_id: str) -> bool:
        return any(d.id == dish_id for d in self.dishes)

    def add_dish(self, dish: Dish):
        '''
        Adds a dish to the selection. Raises ValueError if it is already selected.
        '''
        if self.has_dish(dish.id):
            raise ValueError(f"Dish '{dish.id}' is already selected.")
        self.dishes.append(dish)
        self._regenerate()
        publish_selection_changed(dish.id, "added", len(self.dishes), bus=self._event_bus)

    def remove_dish(self, dish_id: str) -> Dish:
        '''
        Removes a dish from the selection. Raises ValueError if it is not selected.
        '''
        for dish in self.dishes:
            if dish.id == dish_id:
                self.dishes.remove(dish)
                self._regenerate()
                publish_selection_changed(dish_id, "removed", len(self.dishes), bus=self._event_bus)
                return dish
        raise ValueError(f"Dish '{dish_id}' is not selected.")

    def clear(self):
        '''
        Empties the selection and forgets ownership ticks.
        '''
        self.dishes = []
        self.owned_keys = set()
        self._entries = []
        publish_selection_changed("", "cleared", 0, bus=self._event_bus)
        return self

    def get_dishes(self) -> List[Dish]:
        return self.dishes

    def get_items(self) -> List[ShoppingListEntry]:
        '''
        Returns the consolidated shopping list entries.
        '''
        return self._entries

    def _find_entry(self, entry_id: str) -> Optional[ShoppingListEntry]:
        return next((e for e in self._entries if e.id == entry_id), None)

    def set_owned(self, entry_id: str, owned: bool = True) -> ShoppingListEntry:
        '''
        Marks an entry as owned or not. Raises ValueError for an unknown entry id.
        '''
        if self._find_entry(entry_id) is None:
            raise ValueError(f"Shopping list item '{entry_id}' not found.")
        self._entries, self.owned_keys = list_builder.set_owned(
            self._entries, entry_id, owned, self.owned_keys, normalize=self._normalize)
        entry = self._find_entry(entry_id)
        publish_owned_changed(entry.id, entry.name, entry.is_owned, bus=self._event_bus)
        return entry

    def toggle_owned(self, entry_id: str) -> ShoppingListEntry:
        entry = self._find_entry(entry_id)
        if entry is None:
            raise ValueError(f"Shopping list item '{entry_id}' not found.")
        return self.set_owned(entry_id, not entry.is_owned)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self._entries)
        return f"Shopping List ({len(self.dishes)} dishes):\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return [entry.to_dict() for entry in self._entries]
