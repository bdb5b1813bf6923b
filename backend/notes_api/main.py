"""
Notes API Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes store/service wiring, middleware registration, route
       mounting, error mapping, and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (uvicorn notes_api.main:app, or python -m notes_api) and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐        │
    │  │ Req ID   │→│ Logging │→│ GZip │→│ CORS │        │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────┐ ┌──────────────────────┐ │
    │  │ /api/notes CRUD      │ │ GET / and /health    │ │
    │  └──────────────────────┘ └──────────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐  │
    │  │ VALIDATION→400 │ NOT_FOUND→404 │ other→500   │  │
    │  └──────────────────────────────────────────────┘  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_api import __version__
from notes_api.config import settings
from notes_api.exceptions import ErrorKind, NotesAppError
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from notes_api.routes import health, notes
from notes_api.services.note_service import NotesService
from notes_api.store.memory import InMemoryNoteStore

logger = logging.getLogger(__name__)

# The only place an error kind becomes an HTTP status
STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
}

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Called once during app startup, before any other initialization.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up (%s)", settings.app_name, __version__, settings.environment)
    logger.info("Store holds %d notes", len(app.state.notes_service.list_notes()))
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down...", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed JSON in request body"
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg')}"
    return f"Invalid request body: {first.get('msg')}"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers. Every error body is `{"error": message}`.

    Handler hierarchy:
        NotesAppError           → status from STATUS_BY_KIND (400 / 404)
        RequestValidationError  → 400 (malformed JSON, body not an object)
        HTTPException           → its own status (unknown route, bad method)
        Exception (fallback)    → 500, traceback logged server-side only
    """

    @app.exception_handler(NotesAppError)
    async def handle_notes_error(request: Request, exc: NotesAppError):
        status_code = STATUS_BY_KIND.get(exc.kind, 500)
        logger.warning(
            "[%s] %s: %s | Context: %s",
            request_id_var.get(""),
            exc.kind.value,
            exc.message,
            exc.context,
        )
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        message = _describe_request_error(exc)
        logger.warning("[%s] Request validation error: %s", request_id_var.get(""), message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Fatal to the request, not to the process. Details stay in the logs."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR_MESSAGE})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(service: Optional[NotesService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        service: NotesService to serve. When omitted, a fresh service over a
                 new InMemoryNoteStore is built (seeded per settings).

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    if service is None:
        service = NotesService(InMemoryNoteStore(seed=settings.seed_sample_notes))

    app = FastAPI(
        title=settings.app_name,
        description="RESTful API for managing notes (CRUD) with health check",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        openapi_tags=[
            {"name": "Notes", "description": "Notes CRUD operations"},
            {"name": "Health", "description": "Service liveness"},
        ],
        lifespan=lifespan,
    )
    app.state.notes_service = service

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = first).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(notes.router)

    return app


# uvicorn expects `notes_api.main:app` to be importable
app = create_app()
