"""Core evaluator for the MyLisp interpreter.

Strict, eager reduction of a value to normal form. Symbols are replaced by
their bindings, S-expressions have every cell evaluated and are then applied,
everything else (numbers, errors, functions, Q-expressions) is already in
normal form and comes back unchanged.
"""

from __future__ import annotations

import logging

from mylisp import LispValue
from mylisp.evaluation.apply import apply
from mylisp.types.environment import Environment
from mylisp.types.error import Error, ErrorKind
from mylisp.types.expr import SExpr
from mylisp.types.function import Function
from mylisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(env: Environment, expr: LispValue) -> LispValue:
    """Reduce `expr` in `env`. The caller gives up ownership of `expr`."""
    match expr:
        case Symbol():
            return env.lookup(expr)
        case SExpr():
            if env.depth >= env.max_depth:
                logger.debug("evaluation depth %d exceeded", env.max_depth)
                return Error("Maximum evaluation depth exceeded", ErrorKind.DEPTH_EXCEEDED)
            env.depth += 1
            try:
                return evaluate_sexpr(env, expr)
            finally:
                env.depth -= 1

    # --- Atoms and quoted lists return as-is ---
    return expr


def evaluate_sexpr(env: Environment, expr: SExpr) -> LispValue:
    cells = [evaluate(env, c) for c in expr.cells]

    # First error wins, scanning left to right
    for c in cells:
        if isinstance(c, Error):
            return c

    if not cells:
        return expr
    if len(cells) == 1:
        return cells[0]

    head, *args = cells
    if not isinstance(head, Function):
        return Error("Invalid Symbol", ErrorKind.INVALID_SYMBOL)
    return apply(env, head, args)
