# Core type aliases for MyLisp's data model.
# Numbers are plain Python ints; symbols, errors, functions and the two list
# kinds (SExpr / QExpr) are small classes under mylisp.types.
#
# Naming guidance:
# - LispValue: any runtime datum produced by the reader or the evaluator.
# - BuiltinFn: the native signature every builtin implements.

from typing import Any, Callable

__version__ = "0.0.5"

# Runtime value alias
LispValue = Any

# Builtin function type: (env, args) -> value
BuiltinFn = Callable[..., LispValue]
