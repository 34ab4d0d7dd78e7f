"""
UltraMind Backend: Permissive CORS Middleware
===============================================

What:  Adds the cross-origin headers to every response and answers preflights.
How:   OPTIONS requests to any path return a bare 200 without reaching the
       router; every other response gets the three headers below.

Headers:
    Access-Control-Allow-Origin:  * (settings.cors_origin)
    Access-Control-Allow-Headers: Content-Type
    Access-Control-Allow-Methods: GET, POST, OPTIONS

Starlette's CORSMiddleware only decorates requests that carry an Origin
header and only treats OPTIONS as a preflight when
Access-Control-Request-Method is present. The web page contract needs the
headers unconditionally, so this middleware sets them itself.
"""

from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ultramind.config import settings

ALLOWED_HEADERS = "Content-Type"
ALLOWED_METHODS = "GET, POST, OPTIONS"


def cors_headers() -> Dict[str, str]:
    """The header set applied to every response."""
    return {
        "Access-Control-Allow-Origin": settings.cors_origin,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
    }


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Outermost middleware: short-circuits preflights, decorates everything else."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers())

        response = await call_next(request)
        response.headers.update(cors_headers())
        return response
