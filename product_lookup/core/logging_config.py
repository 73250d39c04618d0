"""
Logging setup for host applications embedding the lookup library.

The library itself only creates module loggers; call ``configure_logging``
from the application entry point.
"""

from __future__ import annotations

import logging
from typing import Optional

from product_lookup.config import Settings, get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read (uses global settings if None)
    """
    settings = settings or get_settings()

    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(
        f"Logging configured for {settings.app_name} at {logging.getLevelName(level)}"
    )
