from __future__ import annotations

import re

WORD_LENGTH = 4

_WORD_RE = re.compile(r"[a-z]{%d}" % WORD_LENGTH)


def normalize_word(raw: str) -> str:
    return raw.strip()


def is_valid_word_shape(word: object) -> bool:
    """
    True if word is exactly four lowercase ASCII letters.
    No trimming or case folding: "wind\\n" and "Wind" are both rejected.
    """
    if not isinstance(word, str):
        return False
    return _WORD_RE.fullmatch(word) is not None
