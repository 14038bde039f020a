"""
OrderOrchestrator: places an order against the inventory service's stock.

Flow:
  1. Validate the candidate order
  2. check_stock   -> not available: REJECTED, returned normally
  3. update_stock  -> refused:       REJECTED, StockUpdateError
                   -> reserved:      CREATED

Check and reserve are two separate remote calls with nothing held in
between. Two concurrent orders for the last unit can both pass the check;
the inventory service re-validates on update, so one of them is CREATED
and the other ends REJECTED with StockUpdateError.

Every call persists exactly one order row, whichever way it ends.
"""

import logging
from typing import List, Optional, Tuple

from order_service.client import InventoryTransportError
from order_service.errors import (
    InvalidOrderError,
    InventoryUnavailableError,
    OrderError,
    StockUpdateError,
)
from order_service.models import Order, OrderStatus
from order_service.store import OrderStore

logger = logging.getLogger("order_orchestrator")


class OrderOrchestrator:
    """
    ``inventory`` is anything with async ``check_stock(product, quantity,
    correlation_id=None)`` and ``update_stock(...)`` returning a
    StockResponse and raising InventoryTransportError on transport failure.
    """

    def __init__(self, inventory, store: OrderStore):
        self.inventory = inventory
        self.store = store

    async def create_order(self, candidate: Optional[Order], correlation_id: Optional[str] = None) -> Order:
        try:
            order, error = await self._decide(candidate, correlation_id)
        except Exception:
            logger.exception(f"Unexpected failure placing order, correlation {correlation_id}")
            self._persist(self._rejected_copy(candidate))
            raise
        saved = self._persist(order)
        if error is not None:
            error.order = saved
            raise error
        return saved

    def get_all_orders(self) -> List[Order]:
        return self.store.find_all()

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.store.find_by_id(order_id)

    def _persist(self, order: Order) -> Order:
        saved = self.store.save(order)
        logger.info(f"Persisted order {saved.id} ({saved.product} x {saved.quantity}) with status {saved.status.value}")
        return saved

    @staticmethod
    def _rejected_copy(candidate: Optional[Order]) -> Order:
        if candidate is None:
            return Order(status=OrderStatus.REJECTED)
        return Order(product=candidate.product, quantity=candidate.quantity or 0, status=OrderStatus.REJECTED)

    async def _decide(self, candidate: Optional[Order], correlation_id: Optional[str]) -> Tuple[Order, Optional[OrderError]]:
        if candidate is None or not candidate.product or candidate.quantity is None or candidate.quantity <= 0:
            logger.warning(f"Invalid order details, correlation {correlation_id}")
            # Nothing from the invalid candidate is carried over
            return Order(status=OrderStatus.REJECTED), InvalidOrderError("Invalid order details")

        order = candidate
        try:
            check = await self.inventory.check_stock(order.product, order.quantity, correlation_id=correlation_id)
            if not check.available:
                logger.warning(f"Insufficient stock for {order.product} x {order.quantity} "
                               f"(in stock: {check.stock_quantity}), correlation {correlation_id}")
                order.status = OrderStatus.REJECTED
                return order, None

            update = await self.inventory.update_stock(order.product, order.quantity, correlation_id=correlation_id)
        except InventoryTransportError as e:
            logger.error(f"Inventory unavailable for {order.product} x {order.quantity}: "
                         f"{e.description}, correlation {correlation_id}")
            order.status = OrderStatus.REJECTED
            return order, InventoryUnavailableError(e.description)

        if not update.available:
            # Stock was taken between our check and our update
            logger.warning(f"Stock update refused for {order.product} x {order.quantity} "
                           f"after successful check, correlation {correlation_id}")
            order.status = OrderStatus.REJECTED
            return order, StockUpdateError(f"Failed to update stock: {update.message}")

        order.status = OrderStatus.CREATED
        return order, None
