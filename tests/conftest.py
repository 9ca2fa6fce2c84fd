"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from worldmap.core.config import Settings
from worldmap.core.types import Coordinate
from worldmap.web.app import create_app

# Four corners of a small block in Istanbul, latitude first, open ring.
SCENARIO_A_POINTS = [
    {"lat": 41.0, "lon": 29.0},
    {"lat": 41.0, "lon": 29.1},
    {"lat": 41.1, "lon": 29.1},
    {"lat": 41.1, "lon": 29.0},
]


@pytest.fixture
def square() -> list[Coordinate]:
    return [Coordinate(**p) for p in SCENARIO_A_POINTS]


@pytest.fixture
def app():
    return create_app(settings=Settings())


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a user and return Authorization headers for them."""

    def _register(username: str = "alice", password: str = "secret") -> dict[str, str]:
        resp = client.post(
            "/api/auth/register",
            json={"username": username, "email": f"{username}@example.com", "password": password},
        )
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}

    return _register
