from __future__ import annotations


class WordStoreError(Exception):
    """Base class for errors raised outside the WordStore boundary."""


class ConfigurationError(WordStoreError):
    """Settings are missing or inconsistent."""


class WordFileNotFound(WordStoreError, FileNotFoundError):
    """The word list file to seed from does not exist."""
