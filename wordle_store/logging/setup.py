from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wordle_store.config.settings import Settings

LOGGER_NAME = "wordle_store"


def setup_logging(settings: "Settings", name: str = LOGGER_NAME) -> logging.Logger:
    """
    Build the logger handed to WordStore.

    - File sink gets every record (DEBUG and up), appended across runs
    - Console sink (stdout) gets settings.log_level and up, INFO by default
    - Does not touch the root logger and avoids duplicate handlers
    """

    # Normalize level
    level_name = (settings.log_level or "INFO").upper()
    console_level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # If handlers already exist (e.g., tests), don't double-add
    if logger.handlers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(
                handler, logging.FileHandler
            ):
                handler.setLevel(console_level)
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(settings.log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger
