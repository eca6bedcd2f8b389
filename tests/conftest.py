import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from catalog_store.core.config import Settings
from catalog_store.database import create_databases
from catalog_store.main import create_app
from catalog_store.models import ProductCreateRequest


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        data_dir=tmp_path / "data",
        graphql_ide=None,
        id_generation_attempts=3,
    )


@pytest.fixture
def databases(settings):
    return create_databases(settings)


@pytest.fixture
def product_db(databases):
    return databases[0]


@pytest.fixture
def cart_db(databases):
    return databases[1]


@pytest.fixture
def make_product(product_db):
    def _make(name="Builder Gel", price=10.0, **kwargs):
        return product_db.create_product(
            ProductCreateRequest(product_name=name, product_price=price, **kwargs)
        )
    return _make


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def graphql(client, settings):
    def _execute(query, variables=None):
        response = client.post(
            settings.graphql_path,
            json={"query": query, "variables": variables or {}},
        )
        assert response.status_code == 200
        return response.json()
    return _execute


@pytest.fixture
def read_record():
    def _read(directory: Path, identifier: str) -> dict:
        return json.loads((directory / f"{identifier}.json").read_text(encoding="utf-8"))
    return _read
