
from fastapi import Request
from common import ids

CORRELATION_HEADER = "X-Correlation-Id"

async def add_correlation_id(request: Request, call_next):
    correlation_id = request.headers.get(CORRELATION_HEADER)
    if not correlation_id:
        correlation_id = ids.generate_correlation_id()

    # Store in request state for access in endpoints
    request.state.correlation_id = correlation_id

    response = await call_next(request)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response
