# start_server.py
# Entry point: connect to the database and serve the API on port 8080

import logging
import sys

import uvicorn

from expense_api import database
from expense_api.config import Settings
from expense_api.errors import StartupError
from expense_api.main import create_app
from expense_api.repository import ExpenseRepository

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("start_server")


def main() -> int:
    try:
        settings = Settings.from_env()
    except StartupError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("❌ Invalid configuration: %s", e)
        return 1

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        engine = database.connect(settings)
    except StartupError as e:
        logger.error("❌ %s", e)
        return 1

    app = create_app(ExpenseRepository(engine), settings)
    logger.info("✅ Serving Expense API on %s:%s", settings.host, settings.port)
    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    finally:
        database.close(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
