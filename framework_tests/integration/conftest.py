"""Pytest configuration for integration tests."""

import os
import pytest
from typing import Generator

from jobfilter.core import config as config_module
from jobfilter.core.log import reset_logging


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run each test without JOBFILTER_* variables or leftover global state."""
    for key in list(os.environ):
        if key.startswith("JOBFILTER_"):
            monkeypatch.delenv(key, raising=False)
    yield
    config_module._config_manager._config = None
    reset_logging()
