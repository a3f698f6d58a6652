from __future__ import annotations

import sys
from typing import TextIO

from wordle_store.config.settings import Settings
from wordle_store.logging.setup import setup_logging

from wordle_store.db.word_store import WordStore
from wordle_store.services.wordlist import WordList, seed_valid_words


def check_guesses(store: WordStore, stream: TextIO) -> None:
    """Answer each line from stream until a blank line or EOF."""
    for line in stream:
        guess = line.strip()
        if not guess:
            break
        if store.is_valid_word(guess):
            print(f"'{guess}' is a valid word.")
        else:
            print(f"'{guess}' is not a valid word.")


def main() -> int:
    settings = Settings.load()
    logger = setup_logging(settings)

    # --- DB ---
    logger.info("Using database %s", settings.db_path)
    store = WordStore(settings.db_name, logger=logger, base_dir=settings.db_dir)
    store.create_database()

    if not store.is_reachable():
        logger.error("Database %s is not reachable", store.target)
        return 1

    if not store.initialize_schema():
        logger.error("Could not create tables in %s", store.target)
        return 1

    # --- Seed dictionary ---
    wordlist = WordList.load_from_txt(settings.words_path)
    seed_valid_words(store, wordlist.words)

    # --- Guess loop ---
    print("Enter a 4 letter word per line (blank line to quit):")
    check_guesses(store, sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
