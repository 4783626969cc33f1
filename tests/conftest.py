import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import seeded_store
from product_api.main import create_app

API_KEY = "test-key"


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY)


@pytest.fixture
def store():
    return seeded_store()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth():
    return {"x-api-key": API_KEY}


@pytest.fixture
def new_product():
    return {
        "name": "Desk Lamp",
        "description": "LED lamp with dimmer",
        "price": 29.99,
        "category": "home",
        "inStock": True,
    }
