import logging

from app.core.config import Settings

LOGGER_NAME = "subscription-service"


def configure_logging(settings: Settings) -> logging.Logger:
    """Configure logging defaults and return the application logger.

    The returned logger is handed down explicitly to the middleware, the
    service and the repository instead of being looked up globally.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)
