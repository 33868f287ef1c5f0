"""Runtime environment for MyLisp.

The Environment is a single global frame mapping Symbols to values. It owns a
private copy of every bound value: `define` stores a copy and `lookup` hands
out a copy, so no two owners ever share a list. It is also the context object
threaded through every evaluation call, carrying the nesting depth counter.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Optional

from mylisp import LispValue, config
from mylisp.errors import MyLispTypeError
from mylisp.types.error import Error, ErrorKind
from mylisp.types.symbol import Symbol
from mylisp.types.value import copy_value

logger = logging.getLogger(__name__)


class Environment:
    """Ordered mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "depth", "max_depth")

    def __init__(self, max_depth: Optional[int] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.depth: int = 0
        self.max_depth: int = max_depth if max_depth is not None else config.get_max_depth()

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to a copy of `value`, replacing any previous binding.

        Raises MyLispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MyLispTypeError(f"Cannot define {name} as a symbol")
        if name in self.vars:
            logger.debug("rebinding %s", name)
        self.vars[name] = copy_value(value)

    def lookup(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`.

        An unbound name yields an Error value rather than raising.
        """
        try:
            value = self.vars[name]
        except KeyError:
            return Error(f"Unbound symbol '{name}'", ErrorKind.UNBOUND_SYMBOL)
        return copy_value(value)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings, depth {self.depth}/{self.max_depth}>"
