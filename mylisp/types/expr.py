"""S-expression and Q-expression list values.

Both kinds share one representation: an ordered list of child values owned
exclusively by the expression. They differ only in how the evaluator treats
them: an SExpr is reduced, a QExpr is inert data.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from mylisp import LispValue


class Expr:
    """Base class for the two list kinds."""

    __slots__ = ("cells",)

    open_delim = "("
    close_delim = ")"

    def __init__(self, cells: Optional[Iterable[LispValue]] = None):
        self.cells: list[LispValue] = list(cells) if cells is not None else []

    def append(self, value: LispValue) -> Expr:
        self.cells.append(value)
        return self

    def pop(self, index: int = 0) -> LispValue:
        """Remove and return the child at `index`."""
        return self.cells.pop(index)

    def extend(self, other: Expr) -> Expr:
        """Move every child of `other` onto the end of this expression."""
        self.cells.extend(other.cells)
        other.cells = []
        return self

    def copy(self) -> Expr:
        """Deep copy: children are copied, never shared."""
        from mylisp.types.value import copy_value

        return type(self)(copy_value(c) for c in self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> LispValue:
        return self.cells[index]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(self.open_delim)
            buffer.write(" ".join(str(c) for c in self.cells))
            buffer.write(self.close_delim)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cells!r})"


class SExpr(Expr):
    """An expression list: operator first, operands after."""

    __slots__ = ()


class QExpr(Expr):
    """A quoted list, never evaluated automatically."""

    __slots__ = ()

    open_delim = "{"
    close_delim = "}"
