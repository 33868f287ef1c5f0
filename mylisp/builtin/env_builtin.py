"""Built-in functions for the MyLisp runtime environment.

This module defines the arithmetic, list processing and binding operations
exposed to Lisp code, and the registration helper that installs them into an
Environment. Every builtin takes ``(env, args)`` and owns ``args``; failures
are raised as MyLispError subclasses and become Error values in `apply`.
"""
from __future__ import annotations

import logging
from typing import Callable

from mylisp import LispValue
from mylisp.errors import (
    MyLispArityError,
    MyLispDepthError,
    MyLispEmptyListError,
    MyLispInvalidNumber,
    MyLispNameError,
    MyLispOverflowError,
    MyLispTypeError,
    MyLispZeroDivisionError,
)
from mylisp.evaluation.evaluator import evaluate
from mylisp.types import (
    ErrorKind,
    Function,
    QExpr,
    SExpr,
    Symbol,
    in_range,
    is_number,
    nesting_depth,
    type_name,
)
from mylisp.types.environment import Environment

logger = logging.getLogger(__name__)


# -------------------------------
# Integer helpers
# -------------------------------
def _checked(n: int) -> int:
    if not in_range(n):
        raise MyLispOverflowError("Integer overflow")
    return n


def _div(x: int, y: int) -> int:
    """Integer division truncating toward zero."""
    if y == 0:
        raise MyLispZeroDivisionError()
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _mod(x: int, y: int) -> int:
    """Remainder with the sign of the dividend, so that x == y*(x/y) + x%y."""
    if y == 0:
        raise MyLispZeroDivisionError(kind=ErrorKind.MODULO_BY_ZERO)
    return x - y * _div(x, y)


def _pow(x: int, y: int) -> int:
    if y < 0:
        # 1/x**|y| truncated toward zero
        if x == 0:
            raise MyLispZeroDivisionError()
        if x == 1:
            return 1
        if x == -1:
            return 1 if y % 2 == 0 else -1
        return 0
    # Anything above 1 in magnitude overflows 64 bits well before y == 64
    if abs(x) > 1 and y >= 64:
        raise MyLispOverflowError("Integer overflow")
    return x ** y


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda x, y: x + y,
    "-": lambda x, y: x - y,
    "*": lambda x, y: x * y,
    "/": _div,
    "%": _mod,
    "^": _pow,
    "min": min,
    "max": max,
}


# -------------------------------
# Arithmetic
# -------------------------------
def builtin_op(env: Environment, args: list[LispValue], op: str) -> LispValue:
    """Fold `op` over the numeric arguments from left to right."""
    if not args:
        raise MyLispArityError(f"Function '{op}' passed no arguments")
    for a in args:
        if not is_number(a):
            raise MyLispInvalidNumber("Invalid Number")

    x = args[0]
    if op == "-" and len(args) == 1:
        return _checked(-x)
    fn = OPERATORS[op]
    for y in args[1:]:
        x = _checked(fn(x, y))
    return x


def add(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "+")


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract every later operand from the first; negate a single operand."""
    return builtin_op(env, args, "-")


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "*")


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left to right, truncating toward zero."""
    return builtin_op(env, args, "/")


def mod(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "%")


def power(env: Environment, args: list[LispValue]) -> LispValue:
    """Integer exponentiation, folded left to right: (^ 2 3 2) => 64."""
    return builtin_op(env, args, "^")


def minimum(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "min")


def maximum(env: Environment, args: list[LispValue]) -> LispValue:
    return builtin_op(env, args, "max")


# -------------------------------
# List processing
# -------------------------------
def _single_qexpr(name: str, args: list[LispValue], allow_empty: bool = False) -> QExpr:
    """Check that `args` is exactly one Q-expression, non-empty unless allowed."""
    if len(args) != 1:
        raise MyLispArityError(
            f"Function '{name}' passed too many arguments"
            if args else f"Function '{name}' passed no arguments"
        )
    x = args[0]
    if not isinstance(x, QExpr):
        raise MyLispTypeError(
            f"Function '{name}' passed incorrect type: expected Q-Expression, got {type_name(x)}"
        )
    if not allow_empty and not x:
        raise MyLispEmptyListError(f"Function '{name}' passed {{}}")
    return x


def _within_depth(env: Environment, x: QExpr) -> QExpr:
    """Reject lists nested deeper than the environment allows."""
    if nesting_depth(x) > env.max_depth:
        raise MyLispDepthError("Maximum evaluation depth exceeded")
    return x


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(list a b c) => {a b c}"""
    return _within_depth(env, QExpr(args))


def head(env: Environment, args: list[LispValue]) -> LispValue:
    """(head {a b c}) => {a}"""
    x = _single_qexpr("head", args)
    return QExpr([x.pop(0)])


def tail(env: Environment, args: list[LispValue]) -> LispValue:
    """(tail {a b c}) => {b c}"""
    x = _single_qexpr("tail", args)
    x.pop(0)
    return x


def init(env: Environment, args: list[LispValue]) -> LispValue:
    """(init {a b c}) => {a b}"""
    x = _single_qexpr("init", args)
    x.pop(-1)
    return x


def length(env: Environment, args: list[LispValue]) -> LispValue:
    """(len {a b c}) => 3. An empty list is rejected like head/tail/init."""
    x = _single_qexpr("len", args)
    return len(x)


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Evaluate a quoted expression: (eval {+ 1 2}) => 3"""
    x = _single_qexpr("eval", args, allow_empty=True)
    return evaluate(env, SExpr(x.cells))


def join(env: Environment, args: list[LispValue]) -> LispValue:
    """Concatenate Q-expressions in argument order."""
    if not args:
        raise MyLispArityError("Function 'join' passed no arguments")
    for a in args:
        if not isinstance(a, QExpr):
            raise MyLispTypeError(
                f"Function 'join' passed incorrect type: expected Q-Expression, got {type_name(a)}"
            )
    x = args[0]
    for y in args[1:]:
        x.extend(y)
    return _within_depth(env, x)


# -------------------------------
# Binding
# -------------------------------
def define(env: Environment, args: list[LispValue]) -> LispValue:
    """(def {a b} 1 2) binds a to 1 and b to 2 and returns ()."""
    if not args:
        raise MyLispArityError("Function 'def' passed no arguments")
    names, *values = args
    if not isinstance(names, QExpr):
        raise MyLispTypeError(
            f"Function 'def' passed incorrect type: expected Q-Expression, got {type_name(names)}"
        )
    for n in names:
        if not isinstance(n, Symbol):
            raise MyLispTypeError(f"Function 'def' cannot define non-symbol {n}")
        if n.name in BUILTINS:
            raise MyLispNameError(f"Function 'def' cannot redefine builtin '{n}'")
    if len(names) != len(values):
        raise MyLispArityError(
            f"Function 'def' passed {len(values)} value(s) for {len(names)} symbol(s)"
        )
    for n, v in zip(names, values):
        env.define(n, v)
    return SExpr()


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    # List functions
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    "len": length,
    "init": init,
    # Variable functions
    "def": define,
    # Mathematical functions
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "^": power,
    "min": minimum,
    "max": maximum,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Function(fn) for name, fn in BUILTINS.items()})
    logger.debug("registered %d builtins", len(BUILTINS))
