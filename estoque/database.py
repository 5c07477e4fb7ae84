# estoque/database.py
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import NotFoundError
from .models import Product, ProductDraft

# This file holds the in-memory product collection and its lock.

_MUTABLE_FIELDS = ("name", "quantity", "price")


class ProductStore:
    """
    Authoritative, non-persistent collection of products.

    Products are kept in insertion order. New ids are allocated as the
    current maximum id + 1 (or 1 when empty), so a deleted id only comes
    back if it was the maximum. Every operation holds the store lock, which
    keeps each call atomic when handlers run on worker threads.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._lock = threading.RLock()
        self._products: Dict[int, Product] = {}
        for p in products or ():
            if p.id in self._products:
                raise ValueError(f"duplicate product id {p.id}")
            self._products[p.id] = p.model_copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._products

    def _next_id(self) -> int:
        return max(self._products, default=0) + 1

    def list(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products.values()]

    def get(self, product_id: int) -> Product:
        with self._lock:
            p = self._products.get(product_id)
            if p is None:
                raise NotFoundError()
            return p.model_copy()

    def create(self, draft: ProductDraft) -> Product:
        # draft is expected to be validated by the caller
        with self._lock:
            product = Product(id=self._next_id(), **draft.model_dump())
            self._products[product.id] = product
            return product.model_copy()

    def update(self, product_id: int, patch: Mapping[str, Any]) -> Product:
        with self._lock:
            current = self._products.get(product_id)
            if current is None:
                raise NotFoundError()
            data = current.model_dump()
            data.update({k: v for k, v in patch.items() if k in _MUTABLE_FIELDS})
            data["id"] = current.id
            updated = Product(**data)
            self._products[product_id] = updated
            return updated.model_copy()

    def delete(self, product_id: int) -> None:
        with self._lock:
            if product_id not in self._products:
                raise NotFoundError()
            del self._products[product_id]



def demo_products() -> List[Product]:
    return [
        Product(id=1, name="Produto A", quantity=10, price=15.99),
        Product(id=2, name="Produto B", quantity=5, price=20.50),
    ]
