"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application: logging, CORS, the
``/api`` routes, the landing page, plain-text error handlers, static
assets and the store connection lifecycle.  ``create_app`` builds the
app, which is then instantiated at module import time as ``app``::

    uvicorn exercise_tracker_api.app.main:app --reload
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import settings
from .core.db import close_db, init_db
from .core.errors import NotFoundError, TrackerError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)

VIEWS_DIR = Path(__file__).resolve().parent / "views"
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def get_public_dir() -> Path:
    """Resolve ``settings.public_dir`` against the project root."""
    public_dir = Path(settings.public_dir)
    if not public_dir.is_absolute():
        public_dir = PROJECT_ROOT / public_dir
    return public_dir


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        """Serve the HTML landing page."""
        return FileResponse(VIEWS_DIR / "index.html")

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
        return PlainTextResponse(str(exc) or "Not Found", status_code=404)

    @app.exception_handler(TrackerError)
    async def tracker_error_handler(request: Request, exc: TrackerError) -> PlainTextResponse:
        logger.error("Unhandled %s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc)
        return PlainTextResponse("Internal Server Error", status_code=500)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse("Internal Server Error", status_code=500)

    # Open the shared store connection once for the whole process.
    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_db()

    # Static files are mounted last so that they never shadow a route.
    public_dir = get_public_dir()
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir)), name="public")
    else:
        logger.debug("Static directory %s not found; not serving static files", public_dir)

    return app


# Created at import time so that uvicorn can discover it without
# calling create_app manually.
app = create_app()
