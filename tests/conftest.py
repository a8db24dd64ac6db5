import pytest

from malt.interpreter import Interpreter
from malt.types.environment import Environment
from malt.builtin.env_builtin import register


@pytest.fixture
def env():
    """Fresh root environment with the native builtins loaded (no prelude)."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter with builtins and the packaged prelude."""
    return Interpreter()
