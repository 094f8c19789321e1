import pytest

from mal.builtin.env_builtin import make_root_env
from mal.evaluation.evaluator import evaluate
from mal.reader.parser import read_str


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return make_root_env()


@pytest.fixture
def run(env):
    """Read and evaluate one form against the shared `env` fixture."""
    def _run(source: str):
        return evaluate(read_str(source), env)
    return _run
