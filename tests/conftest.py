import pytest
from fastapi.testclient import TestClient

from rumbl.app.core.config import Settings
from rumbl.app.main import create_app


@pytest.fixture
def app_settings():
    return Settings(project_name="Rumbl Test", debug=True, log_level="DEBUG")


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
