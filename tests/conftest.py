import pytest

from mylisp.builtin.env_builtin import register
from mylisp.evaluation.evaluator import evaluate
from mylisp.reader.parser import parse
from mylisp.reader.read import read
from mylisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate one line of source in the shared test environment."""
    def _run(source):
        return evaluate(env, read(parse(source)))
    return _run
