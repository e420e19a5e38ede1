from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from .config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None, log_to_file: bool = True) -> logging.Logger:
    """Configure the ``kanadle`` logger: rotating file log plus console errors."""
    logger = logging.getLogger("kanadle")
    logger.setLevel(level or settings.LOG_LEVEL)

    if log_to_file and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
        file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3,
                                           encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    # The terminal game shares stderr with the player, so keep the console quiet.
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if settings.DEBUG else logging.ERROR)
    logging.basicConfig(format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S", handlers=[console])
    return logger
