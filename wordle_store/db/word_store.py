from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any

from wordle_store.db import schema
from wordle_store.db.connection import Database
from wordle_store.domain.outcomes import Outcome
from wordle_store.utils.text import is_valid_word_shape

DEFAULT_DB_DIR = "sqlite"


class WordStore:
    """
    Persistence for the word game: the secret-word pool (wordlist) and the
    dictionary of accepted guesses (validWords), kept in one SQLite file.

    Every public method opens its own connection and closes it before
    returning. Nothing raises past this class: failures are logged and turned
    into False or an Outcome.
    """

    def __init__(
        self,
        file_name: str,
        *,
        logger: logging.Logger | None = None,
        base_dir: str | Path = DEFAULT_DB_DIR,
    ) -> None:
        self._target = (Path(base_dir) / file_name).as_posix() if file_name else ""
        self._db = Database(self._target)
        self._log = logger or logging.getLogger(__name__)

    @property
    def target(self) -> str:
        return self._target

    # -------------------------
    # Database / connectivity
    # -------------------------

    def create_database(self) -> Outcome:
        """
        Open (and so materialize) the database file.
        Safe to call when the file already exists.
        """
        if not self._target:
            self._log.error("Failed to create new database: no database file configured.")
            return Outcome.CONNECTION_FAILED
        try:
            with self._db.connect():
                self._log.info("The driver name is SQLite %s", sqlite3.sqlite_version)
                self._log.info("A new database has been created: %s", self._target)
                return Outcome.OK
        except sqlite3.Error:
            self._log.exception("Failed to create new database.")
            return Outcome.CONNECTION_FAILED

    def is_reachable(self) -> bool:
        if not self._target:
            return False
        try:
            with self._db.connect() as conn:
                return conn is not None
        except sqlite3.Error:
            self._log.exception("Failed to establish a database connection.")
            return False

    # -------------------------
    # Schema
    # -------------------------

    def initialize_schema(self) -> bool:
        """
        Drop and recreate both tables.

        Not atomic: if a later statement fails, the earlier ones stay applied.
        """
        if not self._target:
            return False
        try:
            with self._db.connect() as conn:
                cursor = conn.cursor()
                try:
                    for statement in schema.RESET_STATEMENTS:
                        cursor.execute(statement)
                    conn.commit()
                finally:
                    cursor.close()
        except sqlite3.Error:
            self._log.exception("Failed to create tables.")
            return False

        self._log.info("Tables created successfully.")
        return True

    # -------------------------
    # Valid words
    # -------------------------

    def add_valid_word(self, word_id: int, word: Any) -> Outcome:
        """
        Store (word_id, word) in validWords.

        word must be exactly four lowercase letters and word_id a plain int;
        anything else is rejected before the database is touched.
        """
        if not is_valid_word_shape(word):
            return self._reject(word)
        if not isinstance(word_id, int) or isinstance(word_id, bool):
            return self._reject(word_id)

        try:
            with self._db.connect() as conn:
                with conn:
                    conn.execute(schema.INSERT_VALID_WORD, (word_id, word))
        except sqlite3.OperationalError as e:
            if _is_connection_failure(e):
                self._log.exception("Could not open database to add a valid word")
                return Outcome.CONNECTION_FAILED
            self._log.exception("SQL error when trying to add a valid word")
            return Outcome.STATEMENT_FAILED
        except (sqlite3.Error, OverflowError, UnicodeEncodeError):
            # OverflowError: id does not fit in a 64-bit INTEGER
            self._log.exception("SQL error when trying to add a valid word")
            return Outcome.STATEMENT_FAILED

        self._log.info("Added valid word to database: %s", word)
        return Outcome.OK

    def is_valid_word(self, guess: Any) -> bool:
        # Errors here go to stdout, not the log.
        try:
            with self._db.connect() as conn:
                row = conn.execute(schema.COUNT_VALID_WORD, (guess,)).fetchone()
        except (sqlite3.Error, OverflowError, UnicodeEncodeError) as e:
            # UnicodeEncodeError: lone surrogates cannot be bound as text
            print(e)
            return False

        if row is None:
            return False
        return int(row["total"]) >= 1

    def _reject(self, value: Any) -> Outcome:
        shown = _printable(value)
        self._log.warning("Invalid input attempt: %s", shown)
        print(f"Ignoring unacceptable input: {shown}")
        return Outcome.REJECTED


def _printable(value: Any) -> str:
    # Lone surrogates cannot be written to a utf-8 stdout
    return str(value).encode("utf-8", "backslashreplace").decode("utf-8")


def _is_connection_failure(exc: sqlite3.OperationalError) -> bool:
    return "unable to open database" in str(exc).lower()
