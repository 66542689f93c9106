import json

import pytest

from catalog import create_app
from catalog.services.store import InMemoryProductStore, ProductStore


@pytest.fixture
def sample_products():
    return [
        {"id": 1, "name": "Test Product 1", "price": 10.99, "description": "Test description 1"},
        {"id": 2, "name": "Test Product 2", "price": 20.99, "description": "Test description 2"},
    ]


@pytest.fixture
def memory_store(sample_products):
    return InMemoryProductStore(sample_products)


@pytest.fixture
def client(memory_store):
    """Test client backed by the in-memory store."""
    app = create_app(memory_store)
    app.testing = True
    return app.test_client()


@pytest.fixture
def products_file(tmp_path, sample_products):
    path = tmp_path / "products.json"
    path.write_text(json.dumps(sample_products, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def file_client(products_file):
    """Test client backed by a real products.json in a temp dir."""
    app = create_app(ProductStore(products_file))
    app.testing = True
    return app.test_client()
