"""Container module - composition root.

Builds the long-lived collaborators once per process. The pipeline itself
never looks anything up here: create_app() calls these factories and passes
the instances down explicitly.

Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
"""

from functools import lru_cache

from itemflow.core.config import Settings, get_settings
from itemflow.domain.protocols import LoggerProtocol
from itemflow.infrastructure.logging import ConsoleAdapter
from itemflow.infrastructure.persistence import InMemoryItemStore
from itemflow.pipeline import (
    LoggingInterceptor,
    Pipeline,
    RequestLogger,
    SerializationFilter,
)
from itemflow.presentation.routes import ITEMS_GROUP
from itemflow.schemas.item_schemas import VISIBILITY_SCHEMAS


@lru_cache
def get_logger() -> LoggerProtocol:
    """Return the application-scoped logger singleton.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    return build_logger(get_settings())


def build_logger(settings: Settings) -> LoggerProtocol:
    """Build a logger configured for ``settings``' environment and level."""
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.numeric_log_level,
    ).bind(app=settings.app_name, environment=settings.environment.value)


def build_item_store(logger: LoggerProtocol) -> InMemoryItemStore:
    return InMemoryItemStore(logger=logger.bind(component="item_store"))


def build_pipeline(logger: LoggerProtocol) -> Pipeline:
    """Wire the default stages.

    - Global: request logger (every request, matched or not)
    - Route-scoped: request logger for the items group
    - Interceptors: "logging"
    - Projection: item visibility schema
    """
    return Pipeline(
        serialization=SerializationFilter(VISIBILITY_SCHEMAS),
        global_stages=[RequestLogger(logger, stage="global")],
        group_stages={ITEMS_GROUP: [RequestLogger(logger, stage=ITEMS_GROUP)]},
        interceptors={LoggingInterceptor.name: LoggingInterceptor(logger)},
    )
