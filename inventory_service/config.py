
import os
from typing import Dict

def parse_seed(raw: str) -> Dict[str, int]:
    """Parse "name=qty,name=qty" into an ordered mapping."""
    seed: Dict[str, int] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, _, qty = entry.partition("=")
        seed[name.strip()] = int(qty)
    return seed

INVENTORY_SEED = parse_seed(os.getenv("INVENTORY_SEED", "burger=50,pizza=50,sushi=50"))

# Failure injection
INVENTORY_DELAY_MS = int(os.getenv("INVENTORY_DELAY_MS", "0"))
INVENTORY_FAIL_MODE = os.getenv("INVENTORY_FAIL_MODE", "false").lower() == "true"

INVENTORY_SERVICE_PORT = int(os.getenv("INVENTORY_SERVICE_PORT", "8001"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:4200").split(",") if o.strip()]
