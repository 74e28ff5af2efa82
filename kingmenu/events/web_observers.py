"""Web-facing observers for menu events.

This module subscribes to the GLOBAL_EVENT_BUS for every menu event
(selection, shopping ownership, meal plan and pantry changes) and stores a
lightweight in-memory ring buffer of recent events that the web layer
(/api/events) serves as toast notifications.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; the buffer is per-process.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, ALL_EVENTS

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started = False


def _summarize(payload: Any) -> Dict[str, Any]:
    """Flatten a payload into JSON-friendly fields for the UI."""
    if not isinstance(payload, dict):
        return {}
    out: Dict[str, Any] = {}
    for k in ('dish_id', 'action', 'count', 'entry_id', 'name', 'is_owned'):
        if k in payload:
            out[k] = payload[k]
    entry = payload.get('entry')
    if entry is not None and hasattr(entry, 'dish'):
        out['entry_id'] = getattr(entry, 'id', '')
        out['dish_title'] = getattr(entry.dish, 'title', '')
        out['meal_type'] = getattr(entry, 'meal_type', '')
        day = getattr(entry, 'date', None)
        out['date'] = day.isoformat() if day else None
    return out


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        evt.update(_summarize(payload))
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]
    logger.debug("Recorded event %s #%d", event_name, evt['id'])


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in ALL_EVENTS:
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def clear():
    """Drop buffered events and reset the cursor."""
    global _next_id
    with _lock:
        _events.clear()
        _next_id = 1


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'clear', 'get_events', 'MAX_EVENTS']
