"""StockLedger: the only writer of product stock counters. Check and reserve are separate calls."""

import logging
import threading
from typing import Dict, List, Optional

from inventory_service.store import Product, ProductStore

logger = logging.getLogger("stock_ledger")

class StockLedger:
    def __init__(self, store: ProductStore):
        self._store = store
        # One lock per stored product; products are never deleted
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, product_name: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(product_name, threading.Lock())

    def check_availability(self, product_name: str, quantity: int) -> bool:
        product = self._store.find_by_name(product_name)
        return product is not None and product.stock_quantity >= quantity

    def reserve(self, product_name: str, quantity: int) -> bool:
        if self._store.find_by_name(product_name) is None:
            return False
        with self._lock_for(product_name):
            # Re-read under the lock; the stock may have moved since the lookup above
            product = self._store.find_by_name(product_name)
            if product.stock_quantity < quantity:
                return False
            product.stock_quantity -= quantity
            self._store.save(product)
        logger.info(f"Reserved {quantity} x {product_name} (remaining: {product.stock_quantity})")
        return True

    def lookup_by_name(self, product_name: str) -> Optional[Product]:
        return self._store.find_by_name(product_name)

    def list_all(self) -> List[Product]:
        return self._store.find_all()
