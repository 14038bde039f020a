
import asyncio

import httpx
import pytest

from common.contracts import StockResponse
from inventory_service import main as inventory_main
from inventory_service.ledger import StockLedger
from inventory_service.store import ProductStore
from order_service import main as order_main
from order_service.client import HttpInventoryClient, InventoryTransportError
from order_service.orchestrator import OrderOrchestrator
from order_service.store import OrderStore


class InProcessInventoryClient:
    """
    Speaks the stock contract straight to a StockLedger.
    Yields to the event loop around every ledger access so concurrent
    orders interleave the way they would over the network.
    """

    def __init__(self, ledger: StockLedger):
        self.ledger = ledger
        self.calls = []
        self.fail_on = None
        self.fail_description = "unavailable"

    def _current(self, product):
        found = self.ledger.lookup_by_name(product)
        return found.stock_quantity if found is not None else 0

    async def check_stock(self, product, quantity, correlation_id=None):
        self.calls.append(("check", product, quantity))
        if self.fail_on == "check":
            raise InventoryTransportError(self.fail_description)
        await asyncio.sleep(0)
        available = self.ledger.check_availability(product, quantity)
        await asyncio.sleep(0)
        return StockResponse(
            available=available,
            stock_quantity=self._current(product),
            message="Stock available" if available else "Insufficient stock",
        )

    async def update_stock(self, product, quantity, correlation_id=None):
        self.calls.append(("update", product, quantity))
        if self.fail_on == "update":
            raise InventoryTransportError(self.fail_description)
        await asyncio.sleep(0)
        updated = self.ledger.reserve(product, quantity)
        return StockResponse(
            available=updated,
            stock_quantity=self._current(product),
            message="Stock updated successfully" if updated else "Failed to update stock",
        )


@pytest.fixture
def ledger():
    return StockLedger(ProductStore.seeded({"Widget": 10, "Gadget": 3}))


@pytest.fixture
def inventory(ledger):
    return InProcessInventoryClient(ledger)


@pytest.fixture
def order_store():
    return OrderStore()


@pytest.fixture
def orchestrator(inventory, order_store):
    return OrderOrchestrator(inventory, order_store)


@pytest.fixture
def inventory_app(ledger):
    inventory_main.app.dependency_overrides[inventory_main.get_ledger] = lambda: ledger
    yield inventory_main.app
    inventory_main.app.dependency_overrides.clear()


@pytest.fixture
def inventory_http(inventory_app):
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=inventory_app), base_url="http://inventory")


def make_order_app(inventory_client, store):
    """Wire the order app to a given inventory client and store."""
    orch = OrderOrchestrator(inventory_client, store)
    order_main.app.dependency_overrides[order_main.get_orchestrator] = lambda: orch
    return order_main.app


@pytest.fixture
def order_app(inventory_app, order_store):
    client = HttpInventoryClient(
        "http://inventory", timeout_ms=1000, transport=httpx.ASGITransport(app=inventory_app)
    )
    app = make_order_app(client, order_store)
    yield app
    order_main.app.dependency_overrides.clear()


@pytest.fixture
def order_http(order_app):
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=order_app), base_url="http://order")
