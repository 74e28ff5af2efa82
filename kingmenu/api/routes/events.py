from typing import Optional

from fastapi import APIRouter, Query

from kingmenu.events.web_observers import get_events

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("")
def list_events(since: Optional[int] = Query(default=None, ge=0)):
    """Recent menu events newer than the 'since' cursor (toast feed)."""
    return get_events(since)
