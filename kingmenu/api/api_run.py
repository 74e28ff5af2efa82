from fastapi import FastAPI
import logging

from kingmenu.api.routes import dishes, events, meal_plan, pantry, shopping, units
from kingmenu.api.state import get_state
from kingmenu.events.web_observers import start as start_event_observers

# Logging
logger = logging.getLogger("kingmenu_app")

# Initialize FastAPI app
app = FastAPI(title="KingMenu API")

# Include routers
app.include_router(dishes.router)
app.include_router(pantry.router)
app.include_router(shopping.router)
app.include_router(meal_plan.router)
app.include_router(units.router)
app.include_router(events.router)

# Event buffer served by /api/events
start_event_observers()


@app.on_event("startup")
def _startup_state():
    """Load the dish catalog when the app starts."""
    state = get_state()
    logger.info("KingMenu started with %d dishes in the catalog", len(state.dishes))


@app.get("/")
def root():
    return {"app": "KingMenu", "status": "ok"}
