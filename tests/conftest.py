"""
Pytest fixtures for the spaces-admin test suite.

This module provides:
1. Test environment configuration
2. An in-memory platform backend (FastAPI) reachable through httpx
3. SDK client injection and cleanup
"""

import os
import sys

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from admin_core.config import get_settings  # noqa: E402
from spaces_admin import log  # noqa: E402
from spaces_admin.client import AdminClient, _clear_client, set_client  # noqa: E402
from tests.fixtures.fake_backend import FakeBackend  # noqa: E402

TEST_API_URL = "http://testserver"


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables once per session."""
    os.environ["SPACES_ADMIN_ENVIRONMENT"] = "testing"
    os.environ["SPACES_ADMIN_API_URL"] = TEST_API_URL
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clear_notifications():
    """Start every test with an empty notification buffer."""
    log.notifications.clear()
    yield
    log.notifications.clear()


@pytest.fixture
def backend():
    """Fresh in-memory platform backend."""
    return FakeBackend()


@pytest_asyncio.fixture
async def admin_client(backend):
    """SDK client wired to the in-memory backend."""
    client = AdminClient(TEST_API_URL, transport=httpx.ASGITransport(app=backend.app))
    set_client(client)
    yield client
    await client.close()
    _clear_client()
