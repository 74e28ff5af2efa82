"""Event helper utilities.

Helpers for publishing menu state events. Each helper takes an optional bus
so aggregates holding their own bus (tests) and module code using the global
one share the same payload shapes.

Quick import:
    from kingmenu.events.event_helpers import (
        publish_selection_changed, publish_owned_changed,
        publish_meal_plan_added, publish_meal_plan_removed, publish_meal_plan_updated,
        publish_pantry_changed,
    )
"""
from __future__ import annotations
from typing import Any, Optional
from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    SELECTION_CHANGED, SHOPPING_OWNED_CHANGED,
    MEAL_PLAN_ADDED, MEAL_PLAN_REMOVED, MEAL_PLAN_UPDATED,
    PANTRY_CHANGED,
)

__all__ = [
    'publish_selection_changed', 'publish_owned_changed',
    'publish_meal_plan_added', 'publish_meal_plan_removed', 'publish_meal_plan_updated',
    'publish_pantry_changed',
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_selection_changed(dish_id: str, action: str, count: int, bus: Optional[EventBus] = None):
    """Publish a selection.changed event."""
    _bus(bus).publish(SELECTION_CHANGED, {
        'dish_id': dish_id,
        'action': action,
        'count': count,
    })


def publish_owned_changed(entry_id: str, name: Any, is_owned: bool, bus: Optional[EventBus] = None):
    """Publish a shopping.owned_changed event."""
    _bus(bus).publish(SHOPPING_OWNED_CHANGED, {
        'entry_id': entry_id,
        'name': name,
        'is_owned': is_owned,
    })


def publish_meal_plan_added(entry: Any, bus: Optional[EventBus] = None):
    _bus(bus).publish(MEAL_PLAN_ADDED, {'entry': entry})


def publish_meal_plan_removed(entry_id: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(MEAL_PLAN_REMOVED, {'entry_id': entry_id})


def publish_meal_plan_updated(entry: Any, bus: Optional[EventBus] = None):
    _bus(bus).publish(MEAL_PLAN_UPDATED, {'entry': entry})


def publish_pantry_changed(action: str, name: Any, count: int, bus: Optional[EventBus] = None):
    """Publish a pantry.changed event.

    Payload structure:
        {'action': 'added' | 'removed' | 'cleared', 'name': <str>, 'count': <int>}
    """
    _bus(bus).publish(PANTRY_CHANGED, {
        'action': action,
        'name': name,
        'count': count,
    })
