"""Pytest configuration for all tests."""

from pathlib import Path

import pytest
import structlog

from hookflow.core.config import get_settings
from hookflow.core.hooks import HookExecutor, HookRegistry

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "hooks"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep settings independent of the developer's environment and .env file.

    Logging is raised to ERROR so CLI output stays parseable, and structlog
    is reset so no test logs to a stream captured by an earlier one.
    """
    monkeypatch.setenv("HOOKFLOW_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("HOOKFLOW_HOOK_MODULES", "")
    monkeypatch.setenv("HOOKFLOW_HOOK_PATHS", "")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def executor() -> HookExecutor:
    """Provide a fresh hook executor."""
    return HookExecutor()


@pytest.fixture
def registry(executor: HookExecutor) -> HookRegistry:
    """Provide an empty hook registry."""
    return HookRegistry(executor)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding fixture hook plugins."""
    return FIXTURES_DIR
