from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from wordle_store.db.word_store import WordStore
from wordle_store.domain.errors import WordFileNotFound
from wordle_store.utils.text import normalize_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordList:
    """
    Word list loaded from a text file (one word per line), in file order.

    File format:
      wind
      gust
      ...

    Lines are only stripped. Shape checks happen in WordStore.add_valid_word,
    so a bad line is rejected (and logged) there rather than dropped here.
    """

    words: tuple[str, ...]

    @classmethod
    def load_from_txt(cls, path: Path) -> "WordList":
        if not path.exists():
            raise WordFileNotFound(f"Word list file not found: {path}")

        words: list[str] = []
        with path.open("r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                w = normalize_word(line)
                if not w or w.startswith("#"):
                    continue
                words.append(w)

        logger.info("Loaded %s words from %s", len(words), path)
        return cls(words=tuple(words))

    def __len__(self) -> int:
        return len(self.words)


def seed_valid_words(store: WordStore, words: Iterable[str], *, start_id: int = 1) -> int:
    """
    Add each word to the dictionary with consecutive ids starting at start_id.
    Returns how many were stored.
    """
    added = 0
    for word_id, word in enumerate(words, start=start_id):
        if store.add_valid_word(word_id, word).ok:
            added += 1

    logger.info("Seeded %s valid words", added)
    return added
