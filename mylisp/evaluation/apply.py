"""Application of builtin functions.

Builtins report failures by raising MyLispError subclasses. This is the single
place those exceptions are turned back into Error values, so callers of the
evaluator only ever see values.
"""

from __future__ import annotations

import logging

from mylisp import LispValue
from mylisp.errors import MyLispError
from mylisp.types.environment import Environment
from mylisp.types.error import Error
from mylisp.types.function import Function

logger = logging.getLogger(__name__)


def apply(env: Environment, fn: Function, args: list[LispValue]) -> LispValue:
    """Call `fn` with ownership of `args` and return its result."""
    try:
        return fn(env, args)
    except MyLispError as e:
        logger.debug("builtin failed: %s", e)
        return Error(str(e), e.kind)
