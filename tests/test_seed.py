from fastapi.testclient import TestClient

from catalog_store.database import seed_sample_products
from catalog_store.database.seed import SAMPLE_PRODUCTS
from catalog_store.main import create_app


def test_seed_fills_empty_catalog(product_db):
    assert seed_sample_products(product_db) == len(SAMPLE_PRODUCTS)

    names = sorted(p.product_name for p in product_db.get_all_products())
    assert names == sorted(p.product_name for p in SAMPLE_PRODUCTS)


def test_seed_skips_existing_catalog(product_db, make_product):
    make_product("Already here", 1)

    assert seed_sample_products(product_db) == 0
    assert len(product_db.get_all_products()) == 1


def test_startup_seeds_when_enabled(settings):
    settings.seed_sample_products = True

    with TestClient(create_app(settings)) as client:
        result = client.post(
            settings.graphql_path,
            json={"query": "{ getAllProducts { productName } }"},
        ).json()

    assert len(result["data"]["getAllProducts"]) == len(SAMPLE_PRODUCTS)
    assert settings.cart_directory.is_dir()
