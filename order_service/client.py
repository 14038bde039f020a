
import logging
from typing import Optional

import httpx
from pydantic import ValidationError
from common.contracts import StockRequest, StockResponse
from common.correlation import CORRELATION_HEADER

logger = logging.getLogger("inventory_client")

class InventoryTransportError(Exception):
    """The inventory service could not be reached or did not answer with a stock response."""

    def __init__(self, description: str):
        super().__init__(description)
        self.description = description

class HttpInventoryClient:
    """
    Calls the inventory service's stock endpoints. Each call blocks the
    request until a response arrives or the transport gives up; nothing
    is retried.
    """

    def __init__(self, base_url: str, timeout_ms: int, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms
        self._transport = transport

    async def check_stock(self, product: str, quantity: int, correlation_id: Optional[str] = None) -> StockResponse:
        return await self._post("/stock/check", product, quantity, correlation_id)

    async def update_stock(self, product: str, quantity: int, correlation_id: Optional[str] = None) -> StockResponse:
        return await self._post("/stock/update", product, quantity, correlation_id)

    async def _post(self, path: str, product: str, quantity: int, correlation_id: Optional[str]) -> StockResponse:
        url = f"{self.base_url}{path}"
        payload = StockRequest(product=product, quantity=quantity).model_dump()
        headers = {CORRELATION_HEADER: correlation_id} if correlation_id else {}

        # Convert ms to seconds
        timeout_sec = self.timeout_ms / 1000.0
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=timeout_sec) as client:
                response = await client.post(url, json=payload, headers=headers)
        except httpx.TimeoutException:
            logger.error(f"Inventory call {path} timed out after {self.timeout_ms}ms")
            raise InventoryTransportError(f"inventory service timed out after {self.timeout_ms}ms")
        except httpx.RequestError as e:
            logger.error(f"Inventory call {path} failed: {e}")
            raise InventoryTransportError(str(e) or type(e).__name__)

        if response.status_code != 200:
            logger.error(f"Inventory call {path} returned HTTP {response.status_code}")
            raise InventoryTransportError(f"inventory service returned HTTP {response.status_code}")

        try:
            return StockResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.error(f"Inventory call {path} returned a body that is not a stock response")
            raise InventoryTransportError("inventory service returned an invalid stock response")
