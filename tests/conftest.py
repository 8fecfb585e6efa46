import pytest
from fastapi.testclient import TestClient

from book_store_api.app.core.store import BookStore
from book_store_api.app.main import create_app


@pytest.fixture
def store():
    # Each test gets its own seeded store so ids start at 4 again
    return BookStore.with_seed_data()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
