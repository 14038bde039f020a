
import threading
from typing import Dict, List, Optional

from common import ids
from order_service.models import Order

class OrderStore:
    """Append-only order rows. An id is assigned on insert; rows are never updated."""

    def __init__(self):
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    def save(self, order: Order) -> Order:
        row = order.model_copy(update={"id": ids.generate_order_id()})
        with self._lock:
            self._orders[row.id] = row
        return row.model_copy()

    def find_by_id(self, order_id: str) -> Optional[Order]:
        with self._lock:
            row = self._orders.get(order_id)
        return row.model_copy() if row is not None else None

    def find_all(self) -> List[Order]:
        with self._lock:
            return [row.model_copy() for row in self._orders.values()]
