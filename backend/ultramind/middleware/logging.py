"""
UltraMind Backend: Request Logging Middleware
===============================================

What:  One access-log line per HTTP request with status and duration.
How:   Times the downstream call and logs on the "ultramind.access" logger,
       at a level chosen from the status code.

Log line:
    POST /summarize 200 2345.6ms [a1b2c3d4] from 127.0.0.1

Request bodies and document text are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ultramind.middleware.request_id import request_id_var

logger = logging.getLogger("ultramind.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status, duration, request ID and client IP.

    Typical durations:
        - GET /: 1-5ms
        - POST /summarize: 2000-15000ms (Gemini call dominates)
        - POST /summarize-pdf: adds 10-500ms of PDF parsing
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        # Health probes are polled; keep them out of the access log
        if path == "/health":
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        # 5xx → ERROR, 4xx → WARNING, everything else → INFO
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
