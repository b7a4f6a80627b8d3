import pytest

from raiton import new_environment, parse, evaluate


@pytest.fixture
def env():
    """Fresh root environment; builtins resolve without being bound."""
    return new_environment()


@pytest.fixture
def run(env):
    """Parse and evaluate source against the shared `env` fixture."""
    def _run(source: str):
        return evaluate(env, parse(source))
    return _run
