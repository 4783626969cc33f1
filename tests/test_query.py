import pytest

from product_api.database import seed_products
from product_api.models import Product
from product_api.query import ListQuery, category_stats, evaluate, parse_positive_int


@pytest.mark.parametrize("raw,expected", [
    (None, 7),
    ("", 7),
    ("abc", 7),
    ("0", 7),
    ("-3", 7),
    ("4", 4),
    (" 12", 12),
    ("2abc", 2),
    ("1.9", 1),
    ("+5", 5),
])
def test_parse_positive_int(raw, expected):
    assert parse_positive_int(raw, 7) == expected


def test_from_params_defaults():
    q = ListQuery.from_params({})
    assert (q.category, q.q, q.page, q.limit) == (None, None, 1, 10)


def test_from_params_empty_strings_mean_absent():
    q = ListQuery.from_params({"category": "", "q": ""})
    assert q.category is None
    assert q.q is None


def test_limit_clamped_to_100():
    assert ListQuery.from_params({"limit": "150"}).limit == 100
    assert ListQuery.from_params({"limit": "100"}).limit == 100


def _products(n):
    return [
        Product(id=str(i), name=f"Item {i}", description="", price=i, category="c", in_stock=True)
        for i in range(n)
    ]


def test_window_offsets():
    out = evaluate(_products(25), ListQuery(page=3, limit=10))
    assert [p["id"] for p in out["data"]] == [str(i) for i in range(20, 25)]
    assert out["meta"] == {"total": 25, "page": 3, "limit": 10}


def test_total_counts_before_pagination():
    out = evaluate(seed_products(), ListQuery(category="electronics", limit=1))
    assert out["meta"]["total"] == 2
    assert len(out["data"]) == 1


def test_search_uses_case_folding():
    products = [Product(id="1", name="STRASSE Map", description="", price=1, category="c", in_stock=True)]
    assert evaluate(products, ListQuery(q="straße"))["meta"]["total"] == 1


def test_search_matches_name_only():
    out = evaluate(seed_products(), ListQuery(q="16GB"))
    assert out["data"] == []


def test_category_stats():
    assert category_stats(seed_products()) == {"total": 3, "byCategory": {"electronics": 2, "kitchen": 1}}
    assert category_stats([]) == {"total": 0, "byCategory": {}}
