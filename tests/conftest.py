"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from portclean.config import runtime
from tests.helpers.fake_command_runner import FakeCommandRunner

_PORTCLEAN_ENV = (
    "PORTCLEAN_PLATFORM",
    "PORTCLEAN_COMMAND_TIMEOUT_SECONDS",
    "PORTCLEAN_LOG_LEVEL",
    "PORTCLEAN_VERBOSE",
)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep host environment and dotenv files out of every test."""
    for name in _PORTCLEAN_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {})
    yield


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()
