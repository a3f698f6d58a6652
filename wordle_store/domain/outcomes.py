from __future__ import annotations

from enum import Enum


class Outcome(str, Enum):
    """Result of a WordStore operation that has no boolean answer."""

    OK = "ok"
    REJECTED = "rejected"
    CONNECTION_FAILED = "connection_failed"
    STATEMENT_FAILED = "statement_failed"

    @property
    def ok(self) -> bool:
        return self is Outcome.OK
