import pytest
from fastapi.testclient import TestClient

from storefront.core.config import ProductsSettings, get_products_settings
from storefront.main import app
from storefront.schemas.catalog import Category


@pytest.fixture
def products_config():
    return ProductsSettings(
        use_short_catalog_urls=False,
        default_filters=["color", "size", "price"],
        list_out_of_stock_products=True,
    )


@pytest.fixture
def in_stock_only_config():
    return ProductsSettings(list_out_of_stock_products=False)


@pytest.fixture
def category_tree():
    """
    men(1)
      tops(2)
        tees(3)
        hoodies(4)
      (no id)
        jackets(5)
      bottoms(6)
    """
    return Category.model_validate(
        {
            "id": 1,
            "name": "Men",
            "slug": "men",
            "children_data": [
                {
                    "id": 2,
                    "name": "Tops",
                    "slug": "tops",
                    "children_data": [
                        {"id": 3, "name": "Tees", "slug": "tees"},
                        {"id": 4, "name": "Hoodies", "slug": "hoodies", "children_data": []},
                    ],
                },
                {"name": "Unnamed", "children_data": [{"id": 5, "name": "Jackets"}]},
                {"id": 6, "name": "Bottoms", "slug": "bottoms"},
            ],
        }
    )


@pytest.fixture
def client(products_config):
    app.dependency_overrides[get_products_settings] = lambda: products_config
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
