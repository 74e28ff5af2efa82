import logging

import uvicorn
from kingmenu.api.api_run import app
from kingmenu.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL

logger = logging.getLogger("kingmenu_app")


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Uvicorn running on http://localhost:%d (Press CTRL+C to quit)", APP_PORT)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
