"""Pytest configuration and fixtures."""

import os

import pytest

from jrx.core import get_settings
from jrx.validate import SpecValidator


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["JRX_LOG_LEVEL"] = "DEBUG"
    os.environ["JRX_CHECK_ORPHANS"] = "false"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return get_settings()


@pytest.fixture
def validator():
    """Validator that also reports orphaned elements."""
    return SpecValidator(check_orphans=True)


@pytest.fixture
def full_state():
    """Initial state used by the combined-feature tree."""
    return {"showHeader": True, "items": [], "country": ""}
