import pytest

from lisplet.builtin.env_builtin import new_env
from lisplet.evaluation.evaluator import evaluate
from lisplet.interpreter import Interpreter
from lisplet.reader.parser import parse_all


@pytest.fixture
def env():
    """Fresh top-level environment with builtins loaded."""
    return new_env()


@pytest.fixture
def run(env):
    """Evaluate every expression in a source string against `env`; return the last value."""

    def _run(source):
        result = None
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result

    return _run


@pytest.fixture
def interp():
    """Interpreter with the standard prelude loaded."""
    return Interpreter()
