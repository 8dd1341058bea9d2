"""Shared test fixtures for nsdebug test suite."""

import pytest

from nsdebug.lib.debug_lib import EnvStore, InspectOptions, Registry
from nsdebug.lib.debug_lib import registry as _registry_mod


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: tests that sleep on a real clock")


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start=1_000_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_registry():
    """Reset the Registry singleton between tests."""
    old = _registry_mod._registry
    _registry_mod._registry = None
    yield
    _registry_mod._registry = old


@pytest.fixture
def clean_environ(monkeypatch):
    """Run with no DEBUG / DEBUG_* variables; anything set is undone after."""
    for var in ("DEBUG", "DEBUG_COLORS", "DEBUG_DEPTH", "DEBUG_HIDE_DATE"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch


# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def environ():
    """A dict standing in for os.environ."""
    return {}


@pytest.fixture
def env_store(environ):
    return EnvStore(environ)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def lines():
    """Collects every line written to the registry's default sink."""
    return []


@pytest.fixture
def registry(env_store, clock, lines):
    """A fresh registry: plain output, no dates, list sink, fake clock."""
    return Registry(
        env=env_store,
        inspect_opts=InspectOptions(colors=False, hide_date=True),
        default_sink=lines.append,
        clock=clock,
    )
