"""Global test fixtures."""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from shared.config import ENV_LOG_LEVEL, ENV_OUTPUT_DIR, ENV_TOP_N
from shared.logging_config import reset_logging


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Detach handlers installed by setup_logging() before and after each test."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def clean_env(monkeypatch):
    """
    Remove scoring overrides from the process environment.

    Each variable is set then deleted so monkeypatch restores the original
    state even if a test loads a .env file.
    """
    for name in (ENV_LOG_LEVEL, ENV_OUTPUT_DIR, ENV_TOP_N):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
