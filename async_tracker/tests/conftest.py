"""Pytest configuration for the tracker test suite.

Every test runs with the tracker's environment variables cleared and the
external config cache reset, so settings resolve to built-in defaults unless
a test sets them explicitly.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from async_tracker.config import reset_config_cache
from async_tracker.config.env import CONFIG_FILE_ENV, ENV_MAP
from async_tracker.base.logging import LOG_LEVEL_ENV

from async_tracker.tests.helpers import DeferredProducer, StateRecorder


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear tracker env vars and the config file cache around each test."""
    for name in (*ENV_MAP.values(), CONFIG_FILE_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def deferred() -> DeferredProducer:
    return DeferredProducer()


@pytest.fixture()
def recorder() -> StateRecorder:
    return StateRecorder()
