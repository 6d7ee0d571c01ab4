import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.registry import StudentRegistry
from main import create_app


@pytest.fixture
def registry():
    return StudentRegistry()


@pytest.fixture
def client(registry):
    app = create_app(settings=Settings(), registry=registry)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def alice():
    return {"name": "Alice", "age": 20}


@pytest.fixture
def bob():
    return {"name": "Bob", "age": 22}
