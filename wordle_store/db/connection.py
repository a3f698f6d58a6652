from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


class Database:
    """
    Small sync SQLite wrapper.

    Design:
    - No connection is kept between calls; connect() opens a fresh one
    - The connection is closed on every exit path, including errors
    - Rows can be accessed like dicts: row["column"]
    """

    def __init__(self, target: str) -> None:
        self._target = target

    @property
    def target(self) -> str:
        return self._target

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        logger.debug("Opening SQLite connection: %s", self._target)
        conn = sqlite3.connect(self._target)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()
            logger.debug("Closed SQLite connection: %s", self._target)
