"""
bpm_reducer.api.app

FastAPI app factory for the Process Diagram Reducer service.

Responsibilities:
- Build the FastAPI application and register routers, middleware and error handlers.
- Create the shared reduction service once per app.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bpm_reducer import __version__
from bpm_reducer.api.errors import register_exception_handlers
from bpm_reducer.api.routers.diagrams import router as diagrams_router
from bpm_reducer.api.routers.health import router as health_router
from bpm_reducer.observability.logging import configure_logging, get_logger
from bpm_reducer.observability.middleware import RequestContextMiddleware
from bpm_reducer.services.reduction_service import ReductionService
from bpm_reducer.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.log_json,
        cache_loggers=settings.env != "test",
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, version=__version__)
        yield
        log.info("shutdown")

    app = FastAPI(
        title="Process Diagram Reducer",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Nothing here needs startup I/O, so state is ready even without lifespan events.
    app.state.settings = settings
    app.state.reduction_service = ReductionService(settings=settings)

    # Starlette runs the last-added middleware first: CORS answers preflights before
    # request context is bound.
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
        max_age=settings.cors_max_age,
    )

    register_exception_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(diagrams_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; reduction logic stays
# in the service and core layers.
