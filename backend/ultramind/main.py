"""
UltraMind Backend: FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by uvicorn, either through the `ultramind` console script
       (run()) or directly with `uvicorn ultramind.main:app --port 3000`.

Application Architecture:
    Middleware chain (outermost first):
        PermissiveCORS → RequestID → RequestLogging → GZip → router

    Routes:
        GET  /                 plain-text banner
        GET  /health           service health
        POST /summarize        analyze raw text
        POST /summarize-pdf    analyze an uploaded PDF

    Exception handlers:
        ValidationError, malformed body      → 400 {error}
        PdfExtractionError, LLMServiceError  → 500 {error, details}
        404 / 405                            → {error}
        anything else                        → 500 {error, details}

Startup fails fast when GEMINI_API_KEY is missing: run() exits with status 1
before binding the port, and the lifespan hook aborts startup when the app
is launched by uvicorn directly.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ultramind import __version__
from ultramind.config import settings
from ultramind.exceptions import (
    UltraMindError,
    ValidationError,
    PdfExtractionError,
    LLMServiceError,
)
from ultramind.middleware.cors import PermissiveCORSMiddleware, cors_headers
from ultramind.middleware.logging import RequestLoggingMiddleware
from ultramind.middleware.request_id import RequestIDMiddleware, request_id_var
from ultramind.routes import health, summarize
from ultramind.services.analysis_service import TEXT_REQUIRED_MESSAGE
from ultramind.services.upload_service import MISSING_FILE_MESSAGE

logger = logging.getLogger(__name__)

# Attached to every 500 so the web page can tell users where to look
SERVER_ERROR_DETAILS = "Check server terminal for full error details"


def is_json_request(request: Request) -> bool:
    """True when the body is parsed as JSON (no Content-Type, or a JSON one)."""
    content_type = request.headers.get("content-type")
    if not content_type:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] ultramind.services.gemini_service: ...
    Output goes to stdout; the level comes from LOG_LEVEL.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("pdfminer").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and refuse to start without an API key.
    Shutdown: nothing to release (no pools, no files); log only.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("UltraMind Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        # Raising here makes uvicorn abort startup with a non-zero exit
        raise RuntimeError("GEMINI_API_KEY not found; refusing to start") from e

    logger.info("Server running on http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("CORS enabled for origin %s", settings.cors_origin)
    logger.info("=" * 60)

    yield

    logger.info("UltraMind Backend shut down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the {error, details?} envelope.

    Handler hierarchy:
        ValidationError         → 400 (client can fix the input)
        RequestValidationError  → 400 (malformed JSON or wrong field types)
        PdfExtractionError      → 500 (parser message surfaced)
        LLMServiceError         → 500 (upstream message surfaced)
        UltraMindError (base)   → its status_code
        StarletteHTTPException  → its status code (404, 405)
        Exception (fallback)    → 500

    The Exception handler runs outside the middleware stack, so it sets the
    CORS headers itself.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent invalid input; the message says how to fix it."""
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """
        Body could not be parsed or did not match the schema.

        Only a JSON body is reported as malformed JSON. A "file" field that
        holds no upload is a missing file, and a body sent as some other
        content type carries no text.
        """
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request body: %s", rid, exc.errors())

        if any(tuple(err.get("loc", ()))[-1:] == ("file",) for err in exc.errors()):
            return JSONResponse(status_code=400, content={"error": MISSING_FILE_MESSAGE})
        if not is_json_request(request):
            return JSONResponse(status_code=400, content={"error": TEXT_REQUIRED_MESSAGE})

        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid JSON body",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(PdfExtractionError)
    async def handle_pdf_error(request: Request, exc: PdfExtractionError):
        rid = request_id_var.get("")
        logger.error("[%s] PDF extraction error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": exc.message, "details": SERVER_ERROR_DETAILS},
        )

    @app.exception_handler(LLMServiceError)
    async def handle_llm_error(request: Request, exc: LLMServiceError):
        """Gemini call failed; the upstream message is returned verbatim."""
        rid = request_id_var.get("")
        logger.error("[%s] LLM service error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={"error": exc.message, "details": SERVER_ERROR_DETAILS},
        )

    @app.exception_handler(UltraMindError)
    async def handle_app_error(request: Request, exc: UltraMindError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "details": SERVER_ERROR_DETAILS},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Routing errors (unknown path, wrong method) in the same envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors.

        Stack trace is logged server-side; the message is returned like any
        other 500 so the caller sees what went wrong.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": str(exc) or type(exc).__name__, "details": SERVER_ERROR_DETAILS},
            headers=cors_headers(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="UltraMind API",
        description=(
            "Role-aware document analysis using Google Gemini. Send raw text or a PDF "
            "and get key insights, entities, an executive summary and action items."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition, so CORS (added last)
    # wraps everything, including error responses from inner layers.
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(PermissiveCORSMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(summarize.router)

    return app


# uvicorn expects `ultramind.main:app` to be importable
app = create_app()


def run() -> None:
    """
    Console-script entry point: validate configuration, then serve.

    Exits with status 1 and an error naming GEMINI_API_KEY if it is missing.
    """
    setup_logging()
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("❌ ERROR: %s", str(e))
        sys.exit(1)

    import uvicorn

    uvicorn.run(
        app,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
