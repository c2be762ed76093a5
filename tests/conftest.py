import io

import pytest

from ezscheme.interpreter import Interpreter


# Configuration is read from environment variables; make sure a developer's
# shell settings cannot change the behavior under test.
@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    monkeypatch.delenv("EZSCHEME_STRICT_UNBOUND", raising=False)
    monkeypatch.delenv("EZSCHEME_TRACE", raising=False)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def interp(output):
    """Fresh interpreter whose 'write' goes to the `output` buffer."""
    return Interpreter(output)
