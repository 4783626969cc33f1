import threading
import uuid
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from .models import Product

# Record storage.  Handlers depend on ProductStore only; the in-memory
# implementation is what the server runs with.


class ProductStore(ABC):
    @abstractmethod
    def find_all(self) -> List[Product]:
        ...

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        ...

    @abstractmethod
    def insert(self, attributes: Dict[str, Any]) -> Product:
        """Assign a fresh identifier, store the record and return it."""

    @abstractmethod
    def update(self, product_id: str, changes: Dict[str, Any]) -> Optional[Product]:
        """Overwrite only the given attributes; None if the id is unknown."""

    @abstractmethod
    def delete(self, product_id: str) -> Optional[Product]:
        """Remove and return the record; None if the id is unknown."""

    def count(self) -> int:
        return len(self.find_all())


def new_product_id() -> str:
    return str(uuid.uuid4())


class InMemoryProductStore(ProductStore):
    """Insertion-ordered products guarded by a single lock."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Dict[str, Product] = {}
        self._lock = threading.Lock()
        for p in products:
            self._products[p.id] = p.model_copy()

    def find_all(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products.values()]

    def find_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            p = self._products.get(product_id)
            return p.model_copy() if p is not None else None

    def insert(self, attributes: Dict[str, Any]) -> Product:
        with self._lock:
            pid = new_product_id()
            while pid in self._products:
                pid = new_product_id()
            product = Product(id=pid, **attributes)
            self._products[pid] = product
            return product.model_copy()

    def update(self, product_id: str, changes: Dict[str, Any]) -> Optional[Product]:
        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                return None
            changes = {k: v for k, v in changes.items() if k != "id"}
            updated = current.model_copy(update=changes)
            self._products[product_id] = updated
            return updated.model_copy()

    def delete(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.pop(product_id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._products)


def seed_products() -> List[Product]:
    return [
        Product(
            id="1",
            name="Laptop",
            description="High-performance laptop with 16GB RAM",
            price=1200,
            category="electronics",
            in_stock=True,
        ),
        Product(
            id="2",
            name="Smartphone",
            description="Latest model with 128GB storage",
            price=800,
            category="electronics",
            in_stock=True,
        ),
        Product(
            id="3",
            name="Coffee Maker",
            description="Programmable coffee maker with timer",
            price=50,
            category="kitchen",
            in_stock=False,
        ),
    ]


def seeded_store() -> InMemoryProductStore:
    return InMemoryProductStore(seed_products())
