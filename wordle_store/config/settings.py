from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from wordle_store.domain.errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    This class should remain side-effect free except for loading
    environment variables and creating the database directory.
    """

    # Logging
    log_level: str
    log_file: Path

    # Database
    db_dir: Path
    db_name: str

    # Seed data
    words_path: Path

    @property
    def db_path(self) -> Path:
        return self.db_dir / self.db_name

    @classmethod
    def load(cls) -> "Settings":
        """
        Load settings from environment variables.
        """

        # Load .env from the working directory (or a parent) for local development
        load_dotenv(find_dotenv(usecwd=True))

        log_level = os.getenv("LOG_LEVEL", "INFO")
        log_file = Path(os.getenv("LOG_FILE", "wordle_game_logs.log"))

        db_dir = Path(os.getenv("DB_DIR", "sqlite"))
        db_name = os.getenv("DB_NAME", "words.db").strip()
        if "/" in db_name or "\\" in db_name:
            raise ConfigurationError(
                f"DB_NAME must be a plain file name inside DB_DIR, got {db_name!r}"
            )

        words_path = Path(os.getenv("WORDS_PATH", "resources/words.txt"))

        # SQLite creates the file on first connect, but not its directory
        db_dir.mkdir(parents=True, exist_ok=True)

        return cls(
            log_level=log_level,
            log_file=log_file,
            db_dir=db_dir,
            db_name=db_name,
            words_path=words_path,
        )
