# sdk/products.py
import httpx
import requests
from typing import Any, Dict, Optional


class ProductAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _list_params(category: Optional[str], q: Optional[str], page: Optional[int], limit: Optional[int]) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    if category:
        params["category"] = category
    if q:
        params["q"] = q
    if page is not None:
        params["page"] = page
    if limit is not None:
        params["limit"] = limit
    return params


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        # any requests.Session-like object works here (tests pass a TestClient)
        self.session = session if session is not None else requests.Session()
        if api_key:
            self.session.headers.update({"x-api-key": api_key})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _unwrap(self, r) -> Any:
        if r.status_code >= 400:
            try:
                body = r.json()
            except ValueError:
                body = None
            message = body.get("error", r.text) if isinstance(body, dict) else r.text
            raise ProductAPIError(r.status_code, message)
        if r.headers.get("content-type", "").startswith("application/json"):
            return r.json()
        return r.text

    def welcome(self) -> str:
        return self._unwrap(self.session.get(self._url("/"), timeout=self.timeout))

    # Reads
    def list_products(self, category: Optional[str] = None, q: Optional[str] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        r = self.session.get(self._url("/api/products"), params=_list_params(category, q, page, limit),
                             timeout=self.timeout)
        return self._unwrap(r)

    def get_product(self, product_id: str):
        return self._unwrap(self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout))

    def get_stats(self):
        return self._unwrap(self.session.get(self._url("/api/products/stats"), timeout=self.timeout))

    # Writes (need api_key)
    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        payload = {
            "name": name,
            "description": description,
            "price": price,
            "category": category,
            "inStock": in_stock,
        }
        return self._unwrap(self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout))

    def update_product(self, product_id: str, **changes):
        if "in_stock" in changes:
            changes["inStock"] = changes.pop("in_stock")
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=changes, timeout=self.timeout)
        return self._unwrap(r)

    def delete_product(self, product_id: str):
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return self._unwrap(r)["deleted"]

    # Async listing (example)
    async def list_products_async(self, category: Optional[str] = None, q: Optional[str] = None,
                                  page: Optional[int] = None, limit: Optional[int] = None,
                                  transport: Optional[httpx.AsyncBaseTransport] = None):
        async with httpx.AsyncClient(timeout=self.timeout, transport=transport) as client:
            r = await client.get(self._url("/api/products"), params=_list_params(category, q, page, limit))
            return self._unwrap(r)


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "y"}


if __name__ == "__main__":
    import argparse
    import os
    from rich import print

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.getenv("API_KEY"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list", help="List products")
    lp.add_argument("--category", help="Filter by category")
    lp.add_argument("--q", help="Search product names")
    lp.add_argument("--page", type=int)
    lp.add_argument("--limit", type=int)

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    subparsers.add_parser("stats", help="Product counts by category")

    cp = subparsers.add_parser("create", help="Create a product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--description", default="")
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--in-stock", default="true", help="true/false")

    up = subparsers.add_parser("update", help="Update fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--description")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--in-stock", help="true/false")

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--product-id", required=True)

    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url, api_key=args.api_key)

    try:
        if args.command == "list":
            print(c.list_products(args.category, args.q, args.page, args.limit))
        elif args.command == "get":
            print(c.get_product(args.product_id))
        elif args.command == "stats":
            print(c.get_stats())
        elif args.command == "create":
            print(c.create_product(args.name, args.description, args.price, args.category, _parse_bool(args.in_stock)))
        elif args.command == "update":
            changes = {k: v for k, v in {
                "name": args.name,
                "description": args.description,
                "price": args.price,
                "category": args.category,
            }.items() if v is not None}
            if args.in_stock is not None:
                changes["in_stock"] = _parse_bool(args.in_stock)
            print(c.update_product(args.product_id, **changes))
        elif args.command == "delete":
            print(c.delete_product(args.product_id))
    except ProductAPIError as e:
        print(f"[red]{e}[/red]")
        raise SystemExit(1)
