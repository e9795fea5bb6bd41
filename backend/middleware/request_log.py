"""
Request Logging Middleware

Tags every API request with a request id and logs its outcome and latency.
"""

import logging
import time
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("requests")

REQUEST_ID_HEADER = "X-Request-ID"

# Probes are not logged
SKIP_PATHS = {"/health", "/health/ready"}


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    One structured log record per request.

    The request id is taken from the incoming header when the caller sends
    one, else generated, and echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        request.state.request_id = request_id
        start = time.monotonic()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request_failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                },
            )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        log_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "latency_ms": round((time.monotonic() - start) * 1000, 2),
        }

        # Rejected simulations are expected traffic, not warnings
        if response.status_code >= 500:
            logger.error("request", extra=log_data)
        else:
            logger.info("request", extra=log_data)

        return response
