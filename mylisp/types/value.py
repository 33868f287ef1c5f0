"""Helpers shared by every value variant.

Numbers are represented by plain ``int`` restricted to the signed 64-bit range;
the remaining variants are the classes in this package.
"""

from __future__ import annotations

from mylisp import LispValue
from mylisp.types.error import Error
from mylisp.types.expr import Expr, QExpr, SExpr
from mylisp.types.function import Function
from mylisp.types.symbol import Symbol

NUMBER_MIN = -(2 ** 63)
NUMBER_MAX = 2 ** 63 - 1


def is_number(value: LispValue) -> bool:
    # bool is an int subclass but never a Lisp number
    return isinstance(value, int) and not isinstance(value, bool)


def in_range(n: int) -> bool:
    return NUMBER_MIN <= n <= NUMBER_MAX


def copy_value(value: LispValue) -> LispValue:
    """Return an independent copy of `value`.

    Atoms are immutable and are returned as-is; lists are copied deeply.
    """
    if isinstance(value, Expr):
        return value.copy()
    return value


def nesting_depth(value: LispValue) -> int:
    """Number of list levels in `value`: 0 for atoms, 1 for a flat list.

    Walks with an explicit stack so arbitrarily deep values cannot exhaust
    the interpreter stack.
    """
    deepest = 0
    stack = [(value, 1)]
    while stack:
        v, level = stack.pop()
        if isinstance(v, Expr):
            deepest = max(deepest, level)
            stack.extend((c, level + 1) for c in v.cells)
    return deepest


def type_name(value: LispValue) -> str:
    match value:
        case bool():
            return "Unknown"
        case int():
            return "Number"
        case Error():
            return "Error"
        case Symbol():
            return "Symbol"
        case Function():
            return "Function"
        case SExpr():
            return "S-Expression"
        case QExpr():
            return "Q-Expression"
    return "Unknown"


def to_str(value: LispValue) -> str:
    """Render `value` the way the REPL prints it."""
    return str(value)
