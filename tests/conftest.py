import pytest

from schemer.builtin.env_builtin import register
from schemer.evaluation.evaluator import evaluate
from schemer.interpreter import Interpreter
from schemer.printer import render
from schemer.reader.parser import read_all
from schemer.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against `env`, returning the last result."""
    def _run(source: str):
        result = None
        for form in read_all(source):
            result = evaluate(form, env)
        return result
    return _run


@pytest.fixture
def show(run):
    """Like `run`, but returns the rendered result."""
    def _show(source: str) -> str:
        return render(run(source))
    return _show


@pytest.fixture
def interp():
    return Interpreter()
