"""Request/response models shared by the order and inventory services."""

from pydantic import BaseModel
from typing import Optional, Dict, Any

class StockRequest(BaseModel):
    product: str
    quantity: int

class StockResponse(BaseModel):
    # For /stock/update, available=True means the reservation went through
    available: bool
    stock_quantity: int
    message: str

class CreateOrderRequest(BaseModel):
    product: Optional[str] = None
    quantity: Optional[int] = None

class CreateOrderResponse(BaseModel):
    status: str

class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    order_id: Optional[str] = None
    correlation_id: Optional[str] = None

class ErrorResponse(BaseModel):
    error: ErrorDetail
