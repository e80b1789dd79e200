"""Logging setup for hosts and tools embedding the shop package.

Library modules only create loggers; handlers are attached here, once.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int | str | None = None) -> None:
    """Attach a root stream handler.

    Args:
        level: Log level; defaults to $CHESTSHOPS_LOG_LEVEL, then INFO.
    """
    if level is None:
        level = os.getenv("CHESTSHOPS_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("chestshops").setLevel(level)
