"""Error values.

Errors are ordinary runtime values: they are returned, not raised, and the
evaluator detects them by type while reducing an S-expression.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_NUMBER = "invalid-number"
    UNBOUND_SYMBOL = "unbound-symbol"
    INVALID_SYMBOL = "invalid-symbol"
    UNKNOWN_FUNCTION = "unknown-function"
    REDEFINITION = "redefinition"
    ARITY = "arity"
    TYPE = "type"
    EMPTY_LIST = "empty-list"
    DIVISION_BY_ZERO = "division-by-zero"
    MODULO_BY_ZERO = "modulo-by-zero"
    OVERFLOW = "overflow"
    DEPTH_EXCEEDED = "depth-exceeded"


class Error:
    """A terminal value carrying a diagnostic message."""

    __slots__ = ("message", "kind")

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.TYPE):
        self.message = message
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        # The kind is diagnostic metadata; two errors with the same text are equal.
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self):
        return f"Error({self.message!r}, {self.kind.name})"

    def __str__(self):
        return f"Error: {self.message}"
