# product_api/database.py
import itertools
import logging
import threading
from typing import Iterable, List, Optional

from .models import Product, ProductIn

logger = logging.getLogger(__name__)

# Records every fresh store starts from.
SEED_PRODUCTS: List[Product] = [
    Product(id=1, name="T-shirt", description="Cotton T-shirt", price=20.5, tax=2.0),
    Product(id=2, name="Shoes", description="Sport shoes", price=50.0, tax=5.0),
]


class ProductStore:
    """
    Ordered in-memory collection of products shared by the REST and GraphQL apps.

    Ids come from a counter owned by the store, not from the collection length,
    so an id is never handed out twice for the lifetime of the store (or until
    reset()).
    """

    def __init__(self, seed: Optional[Iterable[Product]] = None):
        self._lock = threading.Lock()
        self._seed = list(SEED_PRODUCTS if seed is None else seed)
        self.reset()

    def reset(self) -> None:
        with self._lock:
            self._products: List[Product] = [p.model_copy() for p in self._seed]
            start = max((p.id for p in self._products), default=0) + 1
            self._ids = itertools.count(start)

    def list(self) -> List[Product]:
        return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def insert(self, fields: ProductIn) -> Product:
        with self._lock:
            product = Product(id=next(self._ids), **fields.model_dump())
            self._products.append(product)
        logger.debug("created product %s (%s)", product.id, product.name)
        return product

    def count(self) -> int:
        return len(self._products)

    def __len__(self) -> int:
        return self.count()
