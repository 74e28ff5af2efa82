"""MealPlan aggregate: the set of scheduled meals.

Entries are only ever added, removed or replaced as whole records.
"""
import logging
from typing import List, Optional
from uuid import uuid4
from kingmenu.domain.MealPlanEntry import MealPlanEntry
from kingmenu.events.Event_Bus import GLOBAL_EVENT_BUS
from kingmenu.events.event_helpers import (
    publish_meal_plan_added, publish_meal_plan_removed, publish_meal_plan_updated,
)

logger = logging.getLogger(__name__)


class MealPlan:
    def __init__(self):
        self.entries: List[MealPlanEntry] = []
        self._event_bus = GLOBAL_EVENT_BUS

    def set_event_bus(self, bus):
        self._event_bus = bus
        return self

    def add(self, entry: MealPlanEntry) -> MealPlanEntry:
        '''
        Schedules an entry under a fresh id and returns it.
        '''
        entry.id = f"meal-{uuid4().hex}"
        self.entries.append(entry)
        logger.debug("Scheduled %s", entry)
        publish_meal_plan_added(entry, bus=self._event_bus)
        return entry

    def remove(self, entry_id: str) -> MealPlanEntry:
        '''
        Removes the entry with the given id. Raises ValueError when it does not exist.
        '''
        entry = self.get(entry_id)
        if entry is None:
            raise ValueError(f"Meal plan entry '{entry_id}' not found.")
        self.entries = [e for e in self.entries if e.id != entry_id]
        publish_meal_plan_removed(entry_id, bus=self._event_bus)
        return entry

    def update(self, entry: MealPlanEntry) -> MealPlanEntry:
        '''
        Replaces the stored entry having the same id. Raises ValueError for an unknown id.
        '''
        for i, existing in enumerate(self.entries):
            if existing.id == entry.id:
                self.entries[i] = entry
                publish_meal_plan_updated(entry, bus=self._event_bus)
                return entry
        raise ValueError(f"Meal plan entry '{entry.id}' not found.")

    def get(self, entry_id: str) -> Optional[MealPlanEntry]:
        return next((e for e in self.entries if e.id == entry_id), None)

    def get_entries(self) -> List[MealPlanEntry]:
        return self.entries

    def clear(self):
        self.entries = []
        return self

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(e) for e in self.entries)
        return f"Meal Plan:\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    def to_dict(self):
        return [e.to_dict() for e in self.entries]
