# 📄 File: my_garden/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request to the garden API: what was asked, how it ended and
# how long it took, tagging each entry with a request number.
# 🧪 Purpose (Technical Summary):
# Request logging middleware: binds a request id (incoming X-Request-ID or a new UUID)
# to the logging context, times the request, logs it through StructuredLogger and
# echoes the id in the response headers.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, my_garden.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# my_garden.main (middleware registration)

import time
import uuid
from typing import Collection, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from my_garden.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
SLOW_REQUEST_THRESHOLD_MS = 2000.0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each HTTP request with timing and a correlation id.
    """

    def __init__(self, app: ASGIApp, excluded_paths: Optional[Collection[str]] = None):
        super().__init__(app)
        self.excluded_paths = set(excluded_paths or ())

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in self.excluded_paths:
            return await call_next(request)

        request_id = self._get_or_create_request_id(request)
        start_time = time.perf_counter()

        with log_context(request_id=request_id):
            try:
                response = await call_next(request)
            except Exception:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"HTTP {request.method} {request.url.path} failed after {duration_ms:.2f}ms",
                    exc_info=True,
                    method=request.method,
                    path=request.url.path,
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.log_request(request.method, request.url.path, response.status_code, duration_ms)
            if duration_ms > SLOW_REQUEST_THRESHOLD_MS:
                logger.warning(f"Slow request: {request.method} {request.url.path}", duration_ms=duration_ms)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @staticmethod
    def _get_or_create_request_id(request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id
