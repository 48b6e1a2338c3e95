"""
Notes App Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own NoteStore attached to app.state.store.
Who:   Called by uvicorn to start the server (uvicorn app.main:app), and by
       the test suite to get a fresh app per test.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  CORS → RequestID → Logging            │
    │               → RateLimit → GZip                    │
    │                                                     │
    │  Routes:      /api/notes   /api/categories          │
    │               /health      /{path} (client build)   │
    │                                                     │
    │  Exception Handlers:                                │
    │    Validation/Conflict/InvalidState → 400           │
    │    NotFound → 404      unexpected → 500             │
    │                                                     │
    │  State:       app.state.store (NoteStore)           │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, seed the welcome note (if enabled)
    Shutdown: clear the store (nothing is persisted)
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.exceptions import (
    ConflictError,
    InvalidStateError,
    NotesAppError,
    NotFoundError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.rate_limit import RateLimitMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import categories, health, notes
from app.routes.frontend import build_frontend_router
from app.store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging and welcome note. Shutdown: drop in-memory state."""
    setup_logging()
    logger.info("%s %s starting up...", settings.app_name, __version__)

    store: NoteStore = app.state.store
    if settings.seed_welcome_note:
        note = store.seed_welcome_note()
        logger.info("Seeded welcome note %s", note.id)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("%s shutting down...", settings.app_name)
    store.clear()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str, details=None, headers=None):
    content = {
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the common error body.

    Handler table:
        ValidationError         → 400 validation_error
        ConflictError           → 400 conflict
        InvalidStateError       → 400 invalid_state
        RequestValidationError  → 400 bad_request (malformed JSON, wrong types)
        NotFoundError           → 404 not_found
        HTTPException           → its own status (unknown route, bad method)
        NotesAppError (base)    → 500 server_error
        Exception (fallback)    → 500 internal_server_error
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.warning("[%s] Conflict: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "conflict", exc.message, exc.context)

    @app.exception_handler(InvalidStateError)
    async def handle_invalid_state(request: Request, exc: InvalidStateError):
        return _error_response(400, "invalid_state", exc.message, exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": [str(part) for part in err.get("loc", ())], "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        logger.warning("[%s] Malformed request: %s", request_id_var.get(""), errors)
        return _error_response(
            400,
            "bad_request",
            "The request body could not be parsed",
            {"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        error = "not_found" if exc.status_code == 404 else "http_error"
        return _error_response(
            exc.status_code,
            error,
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(NotesAppError)
    async def handle_app_error(request: Request, exc: NotesAppError):
        logger.error("[%s] Unhandled application error: %s | Context: %s",
                     request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack traces are logged server-side only, never returned."""
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True)
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[NoteStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve. A new empty NoteStore is created when omitted.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Minimal note-taking API: notes (optionally to-do items) grouped into "
            "categories, kept in memory for the lifetime of the process."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else NoteStore(
        default_category_color=settings.default_category_color,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost).
    # The 429 from the rate limiter must still pass through RequestID and CORS.
    app.add_middleware(GZipMiddleware, minimum_size=500)
    if settings.rate_limit_enabled:
        app.add_middleware(RateLimitMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(categories.router)
    app.include_router(health.router)

    # Catch-all client routes go last
    if settings.static_dir:
        if Path(settings.static_dir).is_dir():
            app.include_router(build_frontend_router(settings.static_dir))
        else:
            logger.warning("STATIC_DIR %s does not exist; serving API only", settings.static_dir)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `app.main:app` to be importable
app = create_app()
