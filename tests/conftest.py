from __future__ import annotations

import logging

import pytest

from wordle_store.db.word_store import WordStore


@pytest.fixture
def store_logger() -> logging.Logger:
    # Propagates to root so caplog sees every record
    logger = logging.getLogger("tests.word_store")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def store(tmp_path, store_logger) -> WordStore:
    return WordStore("words.db", logger=store_logger, base_dir=tmp_path)


@pytest.fixture
def ready_store(store) -> WordStore:
    assert store.create_database().ok
    assert store.initialize_schema()
    return store


@pytest.fixture
def unreachable_store(tmp_path, store_logger) -> WordStore:
    # sqlite3 cannot create files inside a directory that does not exist
    return WordStore("words.db", logger=store_logger, base_dir=tmp_path / "missing")
