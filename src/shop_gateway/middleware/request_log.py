"""Request logging middleware.

Logs every HTTP request with method, path (including the query string, since
list views are driven by it), status code, latency, and a short request ID
for correlation. The request_id is also injected into request.state so
router handlers can include it in ApiResponse.

Log format:
    INFO [GET] /api/v1/products?page=2&perPage=5 → 200 (23ms) req_a1b2c3d4e5f6
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("shop.request")


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request.state.request_id = f"req_{uuid.uuid4().hex[:12]}"

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.info(
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            request.state.request_id,
        )
        return response
