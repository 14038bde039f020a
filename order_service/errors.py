"""Errors raised by OrderOrchestrator.create_order(), each after its rejected order is persisted."""

from typing import Optional

from order_service.models import Order


class OrderError(Exception):
    code = "ORDER_ERROR"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.order: Optional[Order] = None


class InvalidOrderError(OrderError):
    code = "INVALID_ORDER"
    status_code = 400


class StockUpdateError(OrderError):
    """The reservation was refused after the availability check had passed."""

    code = "STOCK_UPDATE_FAILED"
    status_code = 409


class InventoryUnavailableError(OrderError):
    code = "INVENTORY_UNAVAILABLE"
    status_code = 503

    def __init__(self, description: str):
        super().__init__(f"Inventory call failed: {description}")
        self.description = description
