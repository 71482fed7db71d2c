"""Logging configuration."""

import logging

from .settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=level or settings.LOG_LEVEL, format=LOG_FORMAT)

    # SQLAlchemy echoes through its own logger when DATABASE_ECHO is set
    if not settings.DATABASE_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
