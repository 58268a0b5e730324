import pytest
from fastapi.testclient import TestClient

from server.server import create_app


@pytest.fixture
def app(services):
    app = create_app()
    app.state.services = services
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
