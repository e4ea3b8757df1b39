import pytest

from loom.builtin.env_builtin import register
from loom.evaluation.evaluator import evaluate
from loom.interpreter import Interpreter
from loom.reader import read_source
from loom.types.environment import Environment
from loom.types.sentinel import Nil


@pytest.fixture
def env():
    """Fresh environment with builtins loaded and a fixed random seed."""
    e = Environment(seed=1234)
    register(e)
    return e


@pytest.fixture
def interp(monkeypatch):
    monkeypatch.delenv("LOOM_SEED", raising=False)
    monkeypatch.delenv("LOOM_PATH", raising=False)
    return Interpreter(seed=1234)


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in the shared env; return the last value."""
    def _run(source):
        result = Nil
        for expr in read_source(source):
            result = evaluate(expr, env)
        return result
    return _run
