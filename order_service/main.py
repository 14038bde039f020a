
import logging
from typing import List, Optional
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from common.contracts import CreateOrderRequest, CreateOrderResponse, ErrorResponse, ErrorDetail
from common.correlation import add_correlation_id
from order_service import config
from order_service.client import HttpInventoryClient
from order_service.errors import OrderError
from order_service.models import Order
from order_service.orchestrator import OrderOrchestrator
from order_service.store import OrderStore

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("order_service")

orchestrator = OrderOrchestrator(
    HttpInventoryClient(config.INVENTORY_SERVICE_URL, config.ORDER_INVENTORY_TIMEOUT_MS),
    OrderStore()
)

def get_orchestrator() -> OrderOrchestrator:
    return orchestrator

app = FastAPI(title="Order Service")
app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_methods=["GET", "POST"], allow_headers=["*"])
app.middleware("http")(add_correlation_id)

@app.exception_handler(OrderError)
async def order_error_handler(request: Request, exc: OrderError):
    details = {"description": exc.description} if hasattr(exc, "description") else None
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=details,
                order_id=exc.order.id if exc.order is not None else None,
                correlation_id=getattr(request.state, "correlation_id", None)
            )
        ).model_dump()
    )

def _to_candidate(order_req: Optional[CreateOrderRequest]) -> Optional[Order]:
    if order_req is None:
        return None
    return Order(product=order_req.product, quantity=order_req.quantity or 0)

@app.get("/health")
def health():
    return {"status": "ok", "service": "order"}

@app.post("/orders", response_model=Order)
async def create_order(request: Request, order_req: Optional[CreateOrderRequest] = None,
                       orchestrator: OrderOrchestrator = Depends(get_orchestrator)):
    correlation_id = request.state.correlation_id
    logger.info(f"Processing order request {order_req} with correlation_id {correlation_id}")

    order = await orchestrator.create_order(_to_candidate(order_req), correlation_id=correlation_id)

    logger.info(f"Order {order.id} finished with status {order.status.value}")
    return order

@app.get("/orders", response_model=List[Order])
def list_orders(orchestrator: OrderOrchestrator = Depends(get_orchestrator)):
    return orchestrator.get_all_orders()

@app.get("/orders/{order_id}", response_model=Order)
def get_order(order_id: str, orchestrator: OrderOrchestrator = Depends(get_orchestrator)):
    order = orchestrator.get_order(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order

@app.post("/rpc/create-order", response_model=CreateOrderResponse)
async def rpc_create_order(request: Request, order_req: CreateOrderRequest,
                           orchestrator: OrderOrchestrator = Depends(get_orchestrator)):
    """Places an order and answers with its status only."""
    order = await orchestrator.create_order(_to_candidate(order_req), correlation_id=request.state.correlation_id)
    return CreateOrderResponse(status=order.status.value)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.ORDER_SERVICE_PORT)
