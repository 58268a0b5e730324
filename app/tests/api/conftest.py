"""Fixtures for API route tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import limiter
from server.server import create_app


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Rate limit counters are process-wide; start every test from zero."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def app(services):
    """Full application with fake-backed services installed before startup."""
    app = create_app()
    app.state.services = services
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
