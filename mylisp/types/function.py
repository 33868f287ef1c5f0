from __future__ import annotations

from mylisp import BuiltinFn


class Function:
    """Opaque wrapper around a native builtin.

    Only the fact that a value is a function is observable from Lisp code:
    it prints as ``<function>`` and two functions are equal only when they
    wrap the same native callable.
    """

    __slots__ = ("fn",)

    def __init__(self, fn: BuiltinFn):
        self.fn = fn

    def __call__(self, env, args):
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.fn is other.fn

    def __hash__(self) -> int:
        return id(self.fn)

    def __repr__(self):
        return "<function>"

    def __str__(self):
        return "<function>"
