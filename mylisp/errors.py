from mylisp.types.error import ErrorKind


class MyLispError(Exception):
    """ Base class for all MyLisp errors"""
    kind = ErrorKind.TYPE


class MyLispSyntaxError(MyLispError):
    """ Raised when the source text does not match the grammar"""

    def __init__(self, message: str, position: int = 0):
        super().__init__(message)
        self.position = position


class MyLispInvalidNumber(MyLispError):
    """ Raised when a number literal or operand is not a valid integer"""
    kind = ErrorKind.INVALID_NUMBER


class MyLispNameError(MyLispError):
    """ Raised when a name cannot be bound"""
    kind = ErrorKind.REDEFINITION


class MyLispArityError(MyLispError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = ErrorKind.ARITY


class MyLispTypeError(MyLispError):
    """ Raised when the types of arguments passed to a function are incorrect"""
    kind = ErrorKind.TYPE


class MyLispEmptyListError(MyLispError):
    """ Raised when a list function is passed {}"""
    kind = ErrorKind.EMPTY_LIST


class MyLispZeroDivisionError(MyLispError):
    """ Raised on division or modulo by zero"""
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Division by zero", kind: ErrorKind | None = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class MyLispOverflowError(MyLispError):
    """ Raised when an arithmetic result leaves the integer range"""
    kind = ErrorKind.OVERFLOW


class MyLispDepthError(MyLispError):
    """ Raised when a value would nest deeper than the configured maximum"""
    kind = ErrorKind.DEPTH_EXCEEDED
