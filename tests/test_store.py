from product_api.database import InMemoryProductStore, seeded_store


def _attrs(**overrides):
    attrs = {"name": "Pan", "description": "", "price": 20, "category": "kitchen", "in_stock": True}
    attrs.update(overrides)
    return attrs


def test_insert_assigns_id_and_keeps_order():
    store = seeded_store()
    created = store.insert(_attrs())
    assert created.id
    assert [p.id for p in store.find_all()] == ["1", "2", "3", created.id]


def test_reads_are_snapshots():
    store = seeded_store()
    p = store.find_by_id("1")
    p.name = "changed"
    assert store.find_by_id("1").name == "Laptop"


def test_update_patches_only_given_attributes():
    store = seeded_store()
    updated = store.update("3", {"in_stock": True})
    assert updated.in_stock is True
    assert updated.name == "Coffee Maker"
    assert store.find_by_id("3").in_stock is True


def test_update_and_delete_unknown_id():
    store = InMemoryProductStore()
    assert store.update("x", {"price": 1}) is None
    assert store.delete("x") is None


def test_delete():
    store = seeded_store()
    removed = store.delete("2")
    assert removed.name == "Smartphone"
    assert store.find_by_id("2") is None
    assert store.count() == 2
