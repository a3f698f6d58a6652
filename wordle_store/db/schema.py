from __future__ import annotations

WORDLIST_DROP_TABLE = "DROP TABLE IF EXISTS wordlist;"
WORDLIST_CREATE_TABLE = (
    "CREATE TABLE wordlist (\n"
    " id integer PRIMARY KEY,\n"
    " word text NOT NULL\n"
    ");"
)

VALID_WORDS_DROP_TABLE = "DROP TABLE IF EXISTS validWords;"
VALID_WORDS_CREATE_TABLE = (
    "CREATE TABLE validWords (\n"
    " id integer PRIMARY KEY,\n"
    " word text NOT NULL\n"
    ");"
)

# Order matters: each table is dropped right before it is recreated.
RESET_STATEMENTS: tuple[str, ...] = (
    WORDLIST_DROP_TABLE,
    WORDLIST_CREATE_TABLE,
    VALID_WORDS_DROP_TABLE,
    VALID_WORDS_CREATE_TABLE,
)

INSERT_VALID_WORD = "INSERT INTO validWords(id,word) VALUES(?, ?)"

# LIKE, not "=": % and _ in the guess act as wildcards.
COUNT_VALID_WORD = "SELECT count(id) as total FROM validWords WHERE word like ?"
