"""
Pytest configuration and fixtures for unit tests.
Keeps process-wide state (environment, global config, logging) from leaking
between tests.
"""

import os
import pytest
from typing import Generator

from jobfilter.core import config as config_module
from jobfilter.core.log import reset_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide JOBFILTER_* variables from the host environment."""
    for key in list(os.environ):
        if key.startswith("JOBFILTER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Reset the global config manager and logging after each test."""
    yield
    config_module._config_manager._config = None
    reset_logging()
