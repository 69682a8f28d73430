"""
Pytest plugin exposing repokit fixtures.

Enable it from a root conftest.py:

    pytest_plugins = ["repokit.pytest_plugin"]
"""

import pytest

from .dated import FixedClock, JsonCodec
from .logging_config import setup_logging


def pytest_configure(config):
    """Route repokit log events through stdlib logging for caplog."""
    setup_logging()


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at the configured instant."""
    return FixedClock()


@pytest.fixture
def json_codec() -> JsonCodec:
    """JSON codec writing dates as ISO-8601 strings."""
    return JsonCodec()
