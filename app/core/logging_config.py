"""Process-wide logging setup, applied once at startup."""

import logging
import time

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class UTCFormatter(logging.Formatter):
    """Formatter whose timestamps are UTC, matching the trailing Z in LOG_DATE_FORMAT."""

    converter = time.gmtime


def configure_logging(settings: Settings) -> None:
    """Configure root logging from LOG_LEVEL (DEBUG forces debug output)."""
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL)
    handler = logging.StreamHandler()
    handler.setFormatter(UTCFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logging.basicConfig(level=level, handlers=[handler])
    # SQL echo is controlled by DEBUG on the engine; keep the logger itself quiet otherwise.
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
