"""Simple Event Bus / Observer implementation for menu state changes.

Event names:
  selection.changed      -> payload {"dish_id": str, "action": "added"|"removed"|"cleared", "count": int}
  shopping.owned_changed -> payload {"entry_id": str, "name": str, "is_owned": bool}
  meal_plan.added        -> payload {"entry": MealPlanEntry}
  meal_plan.removed      -> payload {"entry_id": str}
  meal_plan.updated      -> payload {"entry": MealPlanEntry}
  pantry.changed         -> payload {"action": "added"|"removed"|"cleared", "name": str, "count": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
SELECTION_CHANGED = "selection.changed"
SHOPPING_OWNED_CHANGED = "shopping.owned_changed"
MEAL_PLAN_ADDED = "meal_plan.added"
MEAL_PLAN_REMOVED = "meal_plan.removed"
MEAL_PLAN_UPDATED = "meal_plan.updated"
PANTRY_CHANGED = "pantry.changed"

ALL_EVENTS = (
	SELECTION_CHANGED, SHOPPING_OWNED_CHANGED,
	MEAL_PLAN_ADDED, MEAL_PLAN_REMOVED, MEAL_PLAN_UPDATED,
	PANTRY_CHANGED,
)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event', 'ALL_EVENTS',
	'SELECTION_CHANGED', 'SHOPPING_OWNED_CHANGED', 'MEAL_PLAN_ADDED',
	'MEAL_PLAN_REMOVED', 'MEAL_PLAN_UPDATED', 'PANTRY_CHANGED',
]
