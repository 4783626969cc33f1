import pytest
from fastapi.testclient import TestClient
from rich.console import Console

import cli
from sdk.products import ProductClient


@pytest.fixture
def console(monkeypatch):
    recorder = Console(record=True, width=140)
    monkeypatch.setattr(cli, "console", recorder)
    return recorder


@pytest.fixture
def live_client(monkeypatch, app):
    client = ProductClient(base_url="http://testserver", api_key="test-key", session=TestClient(app))
    monkeypatch.setattr(cli, "c", client)
    monkeypatch.setattr(cli, "product_cache", [])
    return client


def test_show_products(console, live_client):
    cli.show_products(live_client.list_products()["data"])
    text = console.export_text()
    assert "Laptop" in text
    assert "$1200.00" in text


def test_show_products_empty(console):
    cli.show_products([])
    assert "No products found" in console.export_text()


def test_show_page_meta(console):
    cli.show_page_meta({"total": 21, "page": 2, "limit": 10})
    assert "Page 2 of 3" in console.export_text()


def test_show_stats(console, live_client):
    cli.show_stats(live_client.get_stats())
    text = console.export_text()
    assert "3 products" in text
    assert "kitchen" in text


def test_try_api_reports_errors(console, live_client):
    assert cli.try_api(live_client.get_product, "missing") is None
    assert cli.status_message.startswith("Error: HTTP 404")


def test_product_completer_uses_cache(live_client):
    completer = cli.get_product_completer()
    assert list(completer.words) == ["1", "2", "3"]
    assert cli.get_category_completer().words == ["electronics", "kitchen"]
