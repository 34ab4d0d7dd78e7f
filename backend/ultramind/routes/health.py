"""
UltraMind Backend: Banner and Health Check Routes
===================================================

What:  GET / returns a plain-text banner; GET /health reports service status.
How:   /health asks the Gemini service for a lightweight reachability check
       (list_models, no token cost) unless no API key is configured.

Status levels:
    - healthy:   Gemini reachable
    - degraded:  Gemini unreachable or unconfigured (the process still serves
                 requests, but analyses will fail with HTTP 500)
"""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ultramind import __version__
from ultramind.config import settings
from ultramind.schemas.analysis import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

BANNER = (
    "🚀 UltraMind API is Running! POST to /summarize with {text, role} "
    "or to /summarize-pdf with a PDF file"
)

# Initialized once when the module loads
_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Service banner")
async def banner() -> str:
    return BANNER


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status of the backend service and the Gemini API.",
)
async def health_check() -> HealthResponse:
    """
    Check the health of the service and its upstream dependency.

    Returns:
        HealthResponse with the Gemini status and uptime.
    """
    gemini_status = "available"
    overall = "healthy"

    if not settings.gemini_configured:
        gemini_status = "unconfigured"
        overall = "degraded"
    else:
        from ultramind.services.gemini_service import gemini_service
        if not await gemini_service.health_check():
            gemini_status = "unavailable"
            overall = "degraded"
            logger.warning("Health check: Gemini unreachable")

    return HealthResponse(
        status=overall,
        version=__version__,
        gemini=gemini_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
