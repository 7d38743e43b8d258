"""
CodeNotes Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own empty note store.
Who:   Called by uvicorn to start the server (uvicorn codenotes.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│ GZip / CORS  │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────┐ ┌──────────────┐ ┌───────────┐  │
    │  │ /api/notes/... │ │ /api/codes/… │ │ /health   │  │
    │  └────────────────┘ └──────────────┘ └───────────┘  │
    │                                                     │
    │  State:  app.state.note_store (InMemoryNoteStore)   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError→400 │ Request…Error→422      │   │
    │  │ CodeNotesError→500  │ Exception→500          │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the listening address
    Shutdown: log how much data is being discarded (nothing is persisted)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from codenotes import __version__
from codenotes.config import settings
from codenotes.exceptions import CodeNotesError, ValidationError
from codenotes.middleware.logging import RequestLoggingMiddleware
from codenotes.middleware.request_id import RequestIDMiddleware, request_id_var
from codenotes.routes import codes, health, notes
from codenotes.store import InMemoryNoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (captured by Docker / the process supervisor)
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


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("CodeNotes Backend %s starting up...", __version__)
    logger.info("Notes are kept in memory and are lost on restart")
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    stats = app.state.note_store.stats()
    logger.info(
        "CodeNotes Backend shutting down, discarding %d notes in %d collections",
        stats["notes"],
        stats["collections"],
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request (client can fix the input)
        RequestValidationError  → 422 Unprocessable Entity (FastAPI param/body parsing)
        CodeNotesError (base)   → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error (unexpected errors)

    Unknown access codes and deletes of missing notes never reach these
    handlers; the service treats them as successes.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Same body shape as the other handlers; pydantic's error list goes under details."""
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation failed: %d error(s)", rid, len(exc.errors()))
        return JSONResponse(
            status_code=422,
            content={
                "error": "request_validation_error",
                "message": "Request validation failed",
                "details": {"errors": jsonable_encoder(exc.errors())},
                "request_id": rid,
            },
        )

    @app.exception_handler(CodeNotesError)
    async def handle_app_error(request: Request, exc: CodeNotesError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace goes to the server log only, never into the response."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every call builds a new, empty InMemoryNoteStore and attaches it to
    app.state; route dependencies read it from there. Tests create a fresh
    app per case to get an isolated store.
    """
    app = FastAPI(
        title="CodeNotes API",
        description=(
            "Shared notes keyed by an access code. Anyone who knows a code can "
            "list, add, and delete the notes stored under it."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.note_store = InMemoryNoteStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "X-Request-ID",
            "X-Total-Count",
        ],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(codes.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `codenotes.main:app` to be importable
app = create_app()
