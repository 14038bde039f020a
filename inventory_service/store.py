
import threading
from typing import Dict, List, Optional

from pydantic import BaseModel

class Product(BaseModel):
    id: Optional[int] = None
    name: str
    stock_quantity: int = 0

class ProductStore:
    """
    In-memory product rows keyed by name, kept in insertion order.
    Rows handed out are copies; callers write back through save().
    """

    def __init__(self):
        self._rows: Dict[str, Product] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls, seed: Dict[str, int]) -> "ProductStore":
        store = cls()
        for name, qty in seed.items():
            store.save(Product(name=name, stock_quantity=qty))
        return store

    def save(self, product: Product) -> Product:
        if not product.name:
            raise ValueError("Product name is required")
        with self._lock:
            existing = self._rows.get(product.name)
            if existing is not None:
                row = product.model_copy(update={"id": existing.id})
            else:
                row = product.model_copy(update={"id": self._next_id})
                self._next_id += 1
            self._rows[row.name] = row
            return row.model_copy()

    def find_by_name(self, name: str) -> Optional[Product]:
        with self._lock:
            row = self._rows.get(name)
            return row.model_copy() if row is not None else None

    def find_all(self) -> List[Product]:
        with self._lock:
            return [row.model_copy() for row in self._rows.values()]
