from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import seeded_store
from product_api.main import create_app


def test_defaults(monkeypatch):
    for name in ("API_KEY", "PORT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.api_key == "dev-secret-key"
    assert s.port == 3000
    assert s.cors_origins == ["*"]


def test_empty_env_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("API_KEY", "")
    monkeypatch.setenv("PORT", "")
    s = Settings()
    assert s.api_key == "dev-secret-key"
    assert s.port == 3000


def test_empty_api_key_env_still_accepts_default_key(monkeypatch):
    monkeypatch.setenv("API_KEY", "")
    client = TestClient(create_app(settings=Settings(), store=seeded_store()))
    payload = {"name": "Pan", "description": "", "price": 20, "category": "kitchen", "inStock": True}
    r = client.post("/api/products", json=payload, headers={"x-api-key": "dev-secret-key"})
    assert r.status_code == 201


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("API_KEY", "s3cret")
    monkeypatch.setenv("PORT", "8085")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    s = Settings()
    assert (s.api_key, s.port) == ("s3cret", 8085)
    assert s.cors_origins == ["http://a.test", "http://b.test"]
