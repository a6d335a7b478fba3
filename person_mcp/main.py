"""Person MCP API: FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PersonStoreError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store constructed once per app and attached to app.state (explicit injection)
    - Dataset loaded on startup only when the injected store is not yet initialized

Design Decisions:
    - create_app() factory: tests inject a pre-seeded store, ASGI servers use `app`
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from person_mcp.api.error_handlers import register_error_handlers
from person_mcp.api.routes import health, persons, tools
from person_mcp.config import Settings, get_settings
from person_mcp.core.person_store import PersonStore
from person_mcp.infrastructure.csv_loader import load_persons
from person_mcp.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        store: PersonStore = app.state.person_store
        if not store.is_initialized:
            store.initialize(load_persons(settings.dataset_path))
        logger.info("Person MCP API started")
        yield
        logger.info("Person MCP API shutting down")

    return lifespan


def create_app(
    store: PersonStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI app around one PersonStore."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Person MCP API", version="1.0.0",
        lifespan=_build_lifespan(settings),
    )
    app.state.person_store = store if store is not None else PersonStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(persons.router)
    app.include_router(tools.router)

    register_error_handlers(app)
    return app


app = create_app()
