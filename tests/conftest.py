import pytest

from klisp.builtin.env_builtin import create_global_env
from klisp.evaluation.evaluator import evaluate
from klisp.interpreter import Interpreter
from klisp.reader.parser import read_program


@pytest.fixture
def env():
    """Return a fresh global environment (builtins only) for each test."""
    return create_global_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate program text in the test's environment; return the last value."""

    def _run(code):
        result = None
        for expr in read_program(code):
            result = evaluate(expr, env)
        return result

    return _run
