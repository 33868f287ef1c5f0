import pytest

from mylisp.builtin.env_builtin import register
from mylisp.evaluation.evaluator import evaluate
from mylisp.types import Error, ErrorKind, Function, QExpr, SExpr, Symbol
from mylisp.types.environment import Environment


def test_qexpr_is_inert(env):
    assert evaluate(env, QExpr([1, 2, 3])) == QExpr([1, 2, 3])
    quoted = QExpr([Symbol("+"), 1, Symbol("undefined")])
    assert evaluate(env, quoted) == QExpr([Symbol("+"), 1, Symbol("undefined")])


def test_simple_expression(env):
    assert evaluate(env, SExpr([Symbol("+"), 1, 2, 3])) == 6


def test_unary_negation(env):
    assert evaluate(env, SExpr([Symbol("-"), 5])) == -5


def test_division_by_zero(env):
    assert evaluate(env, SExpr([Symbol("/"), 1, 0])) == Error("Division by zero")


def test_error_argument_short_circuits(env):
    assert evaluate(env, SExpr([Symbol("+"), 1, Error("boom")])) == Error("boom")


def test_first_error_wins(env):
    expr = SExpr([Symbol("+"), Error("first"), Symbol("unbound"), Error("third")])
    assert evaluate(env, expr) == Error("first")


def test_error_in_operator_position(env):
    result = evaluate(env, SExpr([Symbol("nope"), 1, SExpr([Symbol("/"), 1, 0])]))
    assert result == Error("Unbound symbol 'nope'")


@pytest.mark.parametrize("value", [7, -3, Error("stays"), QExpr()])
def test_normal_forms_are_unchanged(env, value):
    assert evaluate(env, value) == value


def test_function_is_normal_form(env):
    fn = env.lookup(Symbol("head"))
    assert evaluate(env, fn) is fn


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(env, Symbol("x")) == 42
    result = evaluate(env, Symbol("z"))
    assert result.kind is ErrorKind.UNBOUND_SYMBOL


def test_empty_sexpr_is_unit(env):
    assert evaluate(env, SExpr()) == SExpr()


def test_single_value_collapses(env):
    assert evaluate(env, SExpr([5])) == 5
    assert evaluate(env, SExpr([SExpr([SExpr([5])])])) == 5
    assert evaluate(env, SExpr([QExpr([1])])) == QExpr([1])


def test_single_function_is_returned_not_called(env):
    assert isinstance(evaluate(env, SExpr([Symbol("+")])), Function)


@pytest.mark.parametrize(
    "source",
    ["1 2", "(1 2 3)", "{head} {1 2}", "(() 1)"],
)
def test_non_function_operator(run, source):
    result = run(source)
    assert result == Error("Invalid Symbol")
    assert result.kind is ErrorKind.INVALID_SYMBOL


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", "()"),
        ("()", "()"),
        ("(5)", "5"),
        ("((((5))))", "5"),
        ("{1 2 3}", "{1 2 3}"),
        ("+", "<function>"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(/ (* (+ 8 2) 5) (- 20 10))", "5"),
        ("foo", "Error: Unbound symbol 'foo'"),
        ("(foo 1 2)", "Error: Unbound symbol 'foo'"),
    ]
)
def test_lisp_expressions(run, source, expected):
    assert str(run(source)) == expected


def test_depth_limit():
    env = Environment(max_depth=3)
    register(env)
    assert evaluate(env, SExpr([SExpr([SExpr([1])])])) == 1
    result = evaluate(env, SExpr([SExpr([SExpr([SExpr([1])])])]))
    assert result == Error("Maximum evaluation depth exceeded")
    assert result.kind is ErrorKind.DEPTH_EXCEEDED
    assert env.depth == 0


def test_depth_limit_through_eval_builtin():
    env = Environment(max_depth=4)
    register(env)
    nested = QExpr([1])
    for _ in range(4):
        nested = QExpr([Symbol("eval"), nested])
    result = evaluate(env, SExpr([Symbol("eval"), nested]))
    assert result.kind is ErrorKind.DEPTH_EXCEEDED
    assert env.depth == 0


def test_values_from_environment_are_copies(run):
    run("def {xs} {1 2 3}")
    assert str(run("tail xs")) == "{2 3}"
    assert str(run("xs")) == "{1 2 3}"
