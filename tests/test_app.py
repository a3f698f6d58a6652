from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

import app
from wordle_store.logging.setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in ("LOG_LEVEL", "LOG_FILE", "DB_DIR", "DB_NAME", "WORDS_PATH"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def _write_words(tmp_path: Path, *words: str) -> None:
    path = tmp_path / "resources" / "words.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(words) + "\n", encoding="utf-8")


def test_main_seeds_and_answers_guesses(tmp_path, monkeypatch, capsys):
    _write_words(tmp_path, "wind", "gust", "BAD")
    monkeypatch.setattr("sys.stdin", io.StringIO("wind\nxxxx\n\nrain\n"))

    assert app.main() == 0

    out = capsys.readouterr().out
    assert "'wind' is a valid word." in out
    assert "'xxxx' is not a valid word." in out
    assert "Ignoring unacceptable input: BAD" in out
    # blank line ends the loop
    assert "'rain'" not in out
    assert (tmp_path / "sqlite" / "words.db").is_file()
    assert (tmp_path / "wordle_game_logs.log").is_file()
    log_text = (tmp_path / "wordle_game_logs.log").read_text(encoding="utf-8")
    assert "Using database sqlite/words.db" in log_text


def test_main_fails_when_schema_cannot_be_created(tmp_path, monkeypatch):
    _write_words(tmp_path, "wind")
    monkeypatch.setattr(app.WordStore, "initialize_schema", lambda self: False)
    assert app.main() == 1


def test_main_fails_when_store_unreachable(tmp_path, monkeypatch):
    _write_words(tmp_path, "wind")
    monkeypatch.setattr(app.WordStore, "is_reachable", lambda self: False)
    assert app.main() == 1
