
import asyncio
import logging
from typing import List
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from common.contracts import StockRequest, StockResponse, ErrorResponse, ErrorDetail
from common.correlation import add_correlation_id
from inventory_service import config
from inventory_service.ledger import StockLedger
from inventory_service.store import Product, ProductStore

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("inventory_service")

ledger = StockLedger(ProductStore.seeded(config.INVENTORY_SEED))

def get_ledger() -> StockLedger:
    return ledger

app = FastAPI(title="Inventory Service")
app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_methods=["GET", "POST"], allow_headers=["*"])
app.middleware("http")(add_correlation_id)

async def _inject_failure(correlation_id: str):
    """Returns an error response when forced failure is on, after any configured delay."""
    if config.INVENTORY_FAIL_MODE:
        logger.error(f"Forced failure active. Failing request, correlation {correlation_id}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=ErrorDetail(
                    code="INVENTORY_FAILURE",
                    message="Forced failure mode enabled",
                    correlation_id=correlation_id
                )
            ).model_dump()
        )

    if config.INVENTORY_DELAY_MS > 0:
        logger.info(f"Injecting delay of {config.INVENTORY_DELAY_MS}ms")
        await asyncio.sleep(config.INVENTORY_DELAY_MS / 1000.0)
    return None

def _current_quantity(ledger: StockLedger, product_name: str) -> int:
    product = ledger.lookup_by_name(product_name)
    return product.stock_quantity if product is not None else 0

@app.get("/health")
def health():
    return {"status": "ok", "service": "inventory"}

@app.get("/inventory/products", response_model=List[Product])
def list_products(ledger: StockLedger = Depends(get_ledger)):
    return ledger.list_all()

@app.get("/inventory/{product_name}", response_model=Product)
def get_product(product_name: str, ledger: StockLedger = Depends(get_ledger)):
    product = ledger.lookup_by_name(product_name)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@app.post("/stock/check", response_model=StockResponse)
async def check_stock(request: Request, stock_req: StockRequest, ledger: StockLedger = Depends(get_ledger)):
    correlation_id = request.state.correlation_id
    logger.info(f"Check request for {stock_req.product} x {stock_req.quantity}, correlation {correlation_id}")

    failure = await _inject_failure(correlation_id)
    if failure is not None:
        return failure

    available = ledger.check_availability(stock_req.product, stock_req.quantity)
    return StockResponse(
        available=available,
        stock_quantity=_current_quantity(ledger, stock_req.product),
        message="Stock available" if available else "Insufficient stock"
    )

@app.post("/stock/update", response_model=StockResponse)
async def update_stock(request: Request, stock_req: StockRequest, ledger: StockLedger = Depends(get_ledger)):
    correlation_id = request.state.correlation_id
    logger.info(f"Reserve request for {stock_req.product} x {stock_req.quantity}, correlation {correlation_id}")

    failure = await _inject_failure(correlation_id)
    if failure is not None:
        return failure

    updated = ledger.reserve(stock_req.product, stock_req.quantity)
    if not updated:
        logger.warning(f"Reservation refused for {stock_req.product} x {stock_req.quantity}")
    return StockResponse(
        available=updated,
        stock_quantity=_current_quantity(ledger, stock_req.product),
        message="Stock updated successfully" if updated else "Failed to update stock"
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.INVENTORY_SERVICE_PORT)
