
import os

INVENTORY_SERVICE_URL = os.getenv("INVENTORY_SERVICE_URL", "http://localhost:8001")
ORDER_INVENTORY_TIMEOUT_MS = int(os.getenv("ORDER_INVENTORY_TIMEOUT_MS", "1000"))

ORDER_SERVICE_PORT = int(os.getenv("ORDER_SERVICE_PORT", "8000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:4200").split(",") if o.strip()]
