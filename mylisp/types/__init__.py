from mylisp.types.symbol import Symbol
from mylisp.types.error import Error, ErrorKind
from mylisp.types.function import Function
from mylisp.types.expr import Expr, SExpr, QExpr
from mylisp.types.value import (
    NUMBER_MAX,
    NUMBER_MIN,
    copy_value,
    in_range,
    nesting_depth,
    is_number,
    to_str,
    type_name,
)

__all__ = [
    "Symbol",
    "Error",
    "ErrorKind",
    "Function",
    "Expr",
    "SExpr",
    "QExpr",
    "NUMBER_MAX",
    "NUMBER_MIN",
    "copy_value",
    "in_range",
    "nesting_depth",
    "is_number",
    "to_str",
    "type_name",
]
