import logging
import sys

import uvicorn
from pydantic import ValidationError

from location_service.core.config import get_settings
from location_service.core.logging import configure_logging
from location_service.main import create_app

logger = logging.getLogger("location_service")


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.critical("Invalid configuration: %s", e)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    logger.info("Server starting on port %s", settings.PORT)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
