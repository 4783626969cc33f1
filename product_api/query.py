"""
List-query evaluation: category filter, name search, pagination.

The steps always run in that order and never fail.  Bad ``page`` or
``limit`` values fall back to their defaults instead of raising.
"""

import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .models import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """Parse a leading integer ("2abc" -> 2, "1.9" -> 1).

    Missing, unparsable, zero and negative values give ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


@dataclass
class ListQuery:
    category: Optional[str] = None
    q: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ListQuery":
        return cls(
            category=params.get("category") or None,
            q=params.get("q") or None,
            page=parse_positive_int(params.get("page"), DEFAULT_PAGE),
            limit=min(parse_positive_int(params.get("limit"), DEFAULT_LIMIT), MAX_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def filter_by_category(products: Sequence[Product], category: Optional[str]) -> List[Product]:
    if not category:
        return list(products)
    return [p for p in products if p.category == category]


def search_by_name(products: Sequence[Product], q: Optional[str]) -> List[Product]:
    if not q:
        return list(products)
    term = q.casefold()
    return [p for p in products if term in p.name.casefold()]


def evaluate(products: Sequence[Product], query: ListQuery) -> Dict[str, Any]:
    matched = search_by_name(filter_by_category(products, query.category), query.q)
    window = matched[query.offset:query.offset + query.limit]
    return {
        "meta": {"total": len(matched), "page": query.page, "limit": query.limit},
        "data": [p.to_json() for p in window],
    }


def category_stats(products: Sequence[Product]) -> Dict[str, Any]:
    """Total count plus per-category counts, categories in first-seen order."""
    by_category = Counter(p.category for p in products)
    return {"total": len(products), "byCategory": dict(by_category)}
