
from enum import Enum
from pydantic import BaseModel
from typing import Optional

class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CREATED = "CREATED"
    REJECTED = "REJECTED"

class Order(BaseModel):
    id: Optional[str] = None
    product: Optional[str] = None
    quantity: int = 0
    status: OrderStatus = OrderStatus.PENDING
