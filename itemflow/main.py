"""
Main FastAPI application entry point.

create_app() is the process bootstrap: it builds the store, logger and
pipeline once, mounts the route registry, wires the global stage middleware
ahead of routing and registers RFC 7807 exception handlers.

Run:
    itemflow            # console script, listens on settings.port (PORT, default 3000)
    uvicorn itemflow.main:app
"""

import uvicorn
from fastapi import APIRouter, FastAPI

from itemflow.core.config import Settings, get_settings
from itemflow.core.container import (
    build_item_store,
    build_logger,
    build_pipeline,
    get_logger,
)
from itemflow.domain.protocols import ItemRepository, LoggerProtocol
from itemflow.pipeline import Pipeline
from itemflow.presentation.errors import (
    ErrorResponseBuilder,
    register_exception_handlers,
)
from itemflow.presentation.handlers import ItemsController
from itemflow.presentation.middleware import GlobalStageMiddleware
from itemflow.presentation.routes import (
    build_route_registry,
    register_routes_from_registry,
)


def create_app(
    settings: Settings | None = None,
    *,
    store: ItemRepository | None = None,
    logger: LoggerProtocol | None = None,
    pipeline: Pipeline | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Every collaborator can be injected (tests pass their own); anything left
    out is built from ``settings``.

    Args:
        settings: Application settings (defaults to the cached settings).
        store: Item store (defaults to a fresh in-memory store).
        logger: Structured logger.
        pipeline: Request pipeline (defaults to the standard stage wiring).

    Returns:
        FastAPI: Configured application. The store and pipeline are exposed
            as ``app.state.item_store`` and ``app.state.pipeline``.
    """
    settings = settings or get_settings()
    if logger is None:
        logger = get_logger() if settings is get_settings() else build_logger(settings)
    store = store if store is not None else build_item_store(logger)
    pipeline = pipeline or build_pipeline(logger)
    errors = ErrorResponseBuilder(settings.error_type_base_url)

    app = FastAPI(
        title=settings.app_name,
        description="Layered request pipeline around an in-memory item store",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.is_development,
    )
    app.state.item_store = store
    app.state.pipeline = pipeline

    # Global stages run ahead of routing (they see unmatched paths too)
    app.add_middleware(GlobalStageMiddleware, pipeline=pipeline)

    register_exception_handlers(app, builder=errors, logger=logger)

    router = APIRouter()
    registry = build_route_registry(ItemsController(store), app_name=settings.app_name)
    register_routes_from_registry(router, registry, pipeline, errors=errors)
    app.include_router(router)

    logger.info("Application created", routes=len(registry), port=settings.port)
    return app


app = create_app()


def run() -> None:
    """Serve ``app`` with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "itemflow.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
