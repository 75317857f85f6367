"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import Generator
from pathlib import Path

# Participation checks are on unless a test opts out
os.environ.setdefault("ENFORCE_PARTICIPATION", "true")

import pytest
import structlog

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_settings


@pytest.fixture(autouse=True)
def reset_logging_context() -> Generator[None, None, None]:
    """Clear structlog context between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop the cached Settings so env changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
