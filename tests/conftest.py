import pytest
from fastapi.testclient import TestClient

from baking_assistant.app.core.config import get_settings
from baking_assistant.app.main import create_app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
