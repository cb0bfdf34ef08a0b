"""
Shared test fixtures — test client, fresh session, session store cleanup.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.routers.energy_session import SESSIONS
from backend.session import EnergySession


@pytest.fixture(autouse=True)
def clear_sessions():
    """Empty the in-memory session store before and after each test."""
    SESSIONS.clear()
    yield
    SESSIONS.clear()


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def session():
    """A fresh EnergySession with config defaults."""
    return EnergySession()


@pytest.fixture
def started_session(client):
    """Start a session over the API and return its id."""
    response = client.post("/api/session/start", json={"material": "steel"})
    assert response.status_code == 200
    return response.json()["session_id"]
