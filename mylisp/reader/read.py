"""Reader: turns parse-tree nodes into runtime values."""

from __future__ import annotations

from mylisp import LispValue
from mylisp.errors import MyLispSyntaxError
from mylisp.reader import ast
from mylisp.reader.ast import AstNode
from mylisp.types import Error, ErrorKind, QExpr, SExpr, Symbol, in_range


def read_number(node: AstNode) -> LispValue:
    """Parse a base-10 literal; out-of-range text becomes an Invalid Number error."""
    try:
        n = int(node.contents, 10)
    except ValueError:
        return Error("Invalid Number", ErrorKind.INVALID_NUMBER)
    if not in_range(n):
        return Error("Invalid Number", ErrorKind.INVALID_NUMBER)
    return n


def read(node: AstNode) -> LispValue:
    if node.tag == ast.NUMBER:
        return read_number(node)
    if node.tag == ast.SYMBOL:
        return Symbol(node.contents)

    if node.tag in (ast.ROOT, ast.SEXPR):
        x = SExpr()
    elif node.tag == ast.QEXPR:
        x = QExpr()
    else:
        raise MyLispSyntaxError(f"cannot read node tagged {node.tag!r}", node.position)

    for child in node.children:
        if child.is_artifact:
            continue
        x.append(read(child))
    return x
