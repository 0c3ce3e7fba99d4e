"""
Pytest configuration for API tests

Fixtures and configuration for FastAPI endpoint testing.
The explorer API is replaced by an in-memory mock.
"""

import pytest
from fastapi.testclient import TestClient

from fields_api.config import settings
from fields_api.main import app
from fields_api.tests.mocks import MockExplorerApi


@pytest.fixture
def explorer():
    """Mock explorer holding the 'sample' collection"""
    mock = MockExplorerApi()
    mock.add_template("sample", "S1", "T1", {"timestamp": "t", "name": "Card"})
    mock.add_template("sample", "S1", "T2", {"nation": "USA", "year": "2020"})
    mock.add_template("sample", "S2", "T3", {"name": "Plain"})
    return mock


@pytest.fixture
def client(explorer):
    """Create FastAPI test client backed by the mock explorer"""
    app.state.explorer = explorer
    with TestClient(app) as test_client:
        yield test_client
    app.state.explorer = None


# Auth fixtures
@pytest.fixture
def api_key(monkeypatch):
    """Require an API key on /api/v1 routes"""
    monkeypatch.setattr(settings, "api_key", "test_api_key")
    return "test_api_key"


@pytest.fixture
def auth_headers(api_key):
    """Get authentication headers"""
    return {"X-API-Key": api_key}
