import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from sdk.products import ProductAPIError, ProductClient


@pytest.fixture
def sdk(app):
    return ProductClient(base_url="http://testserver", api_key="test-key", session=TestClient(app))


def test_welcome(sdk):
    assert sdk.welcome().startswith("Welcome")


def test_list_and_stats(sdk):
    page = sdk.list_products(category="electronics", limit=1)
    assert page["meta"] == {"total": 2, "page": 1, "limit": 1}
    assert sdk.get_stats()["byCategory"] == {"electronics": 2, "kitchen": 1}


def test_crud(sdk):
    created = sdk.create_product("Toaster", "2 slots", 25, "kitchen", in_stock=False)
    assert sdk.get_product(created["id"]) == created

    updated = sdk.update_product(created["id"], in_stock=True, price=22.5)
    assert updated["inStock"] is True
    assert updated["price"] == 22.5
    assert updated["name"] == "Toaster"

    assert sdk.delete_product(created["id"])["id"] == created["id"]
    with pytest.raises(ProductAPIError) as exc:
        sdk.get_product(created["id"])
    assert exc.value.status_code == 404
    assert exc.value.message == "Product not found"


def test_write_without_key(app):
    anonymous = ProductClient(base_url="http://testserver", session=TestClient(app))
    with pytest.raises(ProductAPIError) as exc:
        anonymous.create_product("Toaster", "", 25, "kitchen")
    assert exc.value.status_code == 401


def test_list_async(sdk, app):
    page = asyncio.run(sdk.list_products_async(q="coffee", transport=httpx.ASGITransport(app=app)))
    assert [p["id"] for p in page["data"]] == ["3"]


def test_error_body_that_is_not_an_object():
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse

    upstream = FastAPI()

    @upstream.get("/api/products/{product_id}")
    async def broken(product_id: str):
        return JSONResponse(["bad", "gateway"], status_code=502)

    client = ProductClient(base_url="http://testserver", session=TestClient(upstream))
    with pytest.raises(ProductAPIError) as exc:
        client.get_product("1")
    assert exc.value.status_code == 502
    assert exc.value.message == '["bad","gateway"]'
