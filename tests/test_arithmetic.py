import pytest

from mylisp.builtin.env_builtin import add, builtin_op
from mylisp.errors import MyLispArityError
from mylisp.types import Error, ErrorKind, NUMBER_MAX, NUMBER_MIN


@pytest.mark.parametrize(
    "source,expected",
    [
        ("+ 1 2 3", 6),
        ("(+ 1 2 3)", 6),
        ("+ 5", 5),
        ("- 10 3 2", 5),
        ("- 5", -5),
        ("- -5", 5),
        ("* 2 3 4", 24),
        ("* -2 3", -6),
        ("/ 12 3", 4),
        ("/ 7 2", 3),
        ("/ -7 2", -3),
        ("/ 7 -2", -3),
        ("/ 100 2 5", 10),
        ("% 7 3", 1),
        ("% -7 2", -1),
        ("% 7 -2", 1),
        ("^ 2 10", 1024),
        ("^ 2 0", 1),
        ("^ 2 3 2", 64),
        ("^ -2 3", -8),
        ("^ 2 -1", 0),
        ("^ 1 -5", 1),
        ("^ -1 -3", -1),
        ("^ -1 -2", 1),
        ("^ 2 62", 2 ** 62),
        ("min 3 1 2", 1),
        ("max 3 1 2", 3),
        ("min -4", -4),
        ("+ (* 2 3) (- 10 4)", 12),
        ("- (+ 10 5) (* 2 3)", 9),
        ("max (min 1 2) (min 5 6)", 5),
        ("- 9223372036854775807 1", NUMBER_MAX - 1),
        ("-9223372036854775808", NUMBER_MIN),
    ]
)
def test_lisp_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,message,kind",
    [
        ("/ 1 0", "Division by zero", ErrorKind.DIVISION_BY_ZERO),
        ("/ 10 2 0 5", "Division by zero", ErrorKind.DIVISION_BY_ZERO),
        ("% 1 0", "Division by zero", ErrorKind.MODULO_BY_ZERO),
        ("^ 0 -1", "Division by zero", ErrorKind.DIVISION_BY_ZERO),
        ("+ {1}", "Invalid Number", ErrorKind.INVALID_NUMBER),
        ("+ 1 {1}", "Invalid Number", ErrorKind.INVALID_NUMBER),
        ("* 2 head", "Invalid Number", ErrorKind.INVALID_NUMBER),
        ("* 9223372036854775807 2", "Integer overflow", ErrorKind.OVERFLOW),
        ("+ 9223372036854775807 1", "Integer overflow", ErrorKind.OVERFLOW),
        ("- -9223372036854775808", "Integer overflow", ErrorKind.OVERFLOW),
        ("/ -9223372036854775808 -1", "Integer overflow", ErrorKind.OVERFLOW),
        ("^ 2 63", "Integer overflow", ErrorKind.OVERFLOW),
        ("^ 3 1000000000000", "Integer overflow", ErrorKind.OVERFLOW),
        ("+ 1 99999999999999999999", "Invalid Number", ErrorKind.INVALID_NUMBER),
    ]
)
def test_arithmetic_errors(run, source, message, kind):
    result = run(source)
    assert result == Error(message)
    assert result.kind is kind


def test_unbound_operand(run):
    assert run("+ 1 a") == Error("Unbound symbol 'a'")


def test_large_exponent_of_unit_base(run):
    assert run("^ 1 1000000000000") == 1
    assert run("^ -1 1000000000001") == -1
    assert run("^ 0 1000000000000") == 0


def test_direct_call_without_arguments(env):
    with pytest.raises(MyLispArityError):
        add(env, [])
    with pytest.raises(MyLispArityError, match="'max'"):
        builtin_op(env, [], "max")
