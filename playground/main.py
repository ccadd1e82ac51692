"""todo.txt Playground API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PlaygroundError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Capability acquisition starts on startup and never blocks it

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Loader started, not awaited, in lifespan: requests are served in the
      LOADING state and the page shows the fallback view meanwhile
"""

import logging
from contextlib import asynccontextmanager
from importlib.resources import files

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from playground.api.error_handlers import register_error_handlers
from playground.infrastructure.capability_loader import init_capability_loader
from playground.infrastructure.observability import setup_logging
from playground.config import get_settings
from playground.api.routes import (
    capability_status, health, session_lifecycle, session_stream,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_capability_loader(
        settings.parser_entrypoint, settings.capability_load_timeout_seconds,
    )
    logger.info("Playground API started")
    yield
    logger.info("Playground API shutting down")


app = FastAPI(
    title="todo.txt Playground API", version="0.1.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(capability_status.router)
app.include_router(session_lifecycle.router)
app.include_router(session_stream.router)

register_error_handlers(app)

# Mounted AFTER API routes so /api/v1/* takes precedence
app.mount(
    "/",
    StaticFiles(directory=str(files("playground") / "static"), html=True),
    name="static",
)
