"""Shared fixtures for API tests."""

from __future__ import annotations

import httpx
import pytest

from dronenav.api.app import app
from dronenav.services.engine import PlanningEngine


@pytest.fixture
def test_app(zones, regulations):
    """FastAPI app serving the bundled catalogs."""
    previous = getattr(app.state, "engine", None)
    app.state.engine = PlanningEngine.from_catalogs(zones, regulations)
    yield app
    app.state.engine = previous


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
