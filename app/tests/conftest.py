import pytest
from fastapi.testclient import TestClient

from app.bootstrap import create_app
from app.core.config import settings
from app.lifecycle import register_lifecycle


@pytest.fixture
def app():
    application = create_app()
    register_lifecycle(application)
    return application


@pytest.fixture
def client(app):
    # context manager runs the startup hook -> app.state.stores
    with TestClient(app) as c:
        yield c


@pytest.fixture
def stores(client):
    return client.app.state.stores


@pytest.fixture
def position_mode(monkeypatch):
    monkeypatch.setattr(settings, "delete_mode", "position")
