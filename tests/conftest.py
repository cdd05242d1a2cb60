"""Root conftest — shared test configuration."""

import os

import pytest

# Ensure tests never reach a real Supabase project
os.environ.setdefault("SUPABASE_URL", "")
os.environ.setdefault("SUPABASE_ANON_KEY", "")
os.environ.setdefault("ENVIRONMENT", "test")

from fastapi.testclient import TestClient  # noqa: E402

from bbnweb.app import app  # noqa: E402
from bbnweb.services.auth_service import ANONYMOUS, get_auth_state  # noqa: E402


@pytest.fixture
def client():
    """Test client with auth resolved to the anonymous state."""
    app.dependency_overrides[get_auth_state] = lambda: ANONYMOUS
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def client_as():
    """Factory returning a test client whose requests carry the given auth state."""
    def _make(auth_state):
        app.dependency_overrides[get_auth_state] = lambda: auth_state
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
