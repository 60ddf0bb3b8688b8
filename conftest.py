"""Pytest configuration and shared fixtures."""

import pytest

# Load env vars
from dotenv import load_dotenv
load_dotenv()

from lib.sharelink.config import get_config


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: mark test as exercising the HTTP layer")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="function", autouse=True)
def fresh_config():
    """Drop the cached share-link config so env changes in a test take effect."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def fr_board():
    """5x5 board with a Qu digraph tile, as written by the app."""
    return (
        "A", "B", "C", "D", "E",
        "F", "G", "H", "I", "J",
        "K", "L", "M", "N", "O",
        "P", "Qu", "R", "S", "T",
        "U", "V", "W", "X", "Y",
    )
