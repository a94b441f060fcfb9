"""Route registry and FastAPI route generation."""

from itemflow.presentation.routes.generator import register_routes_from_registry
from itemflow.presentation.routes.registry import (
    ITEMS_GROUP,
    SYSTEM_GROUP,
    build_route_registry,
)

__all__ = [
    "ITEMS_GROUP",
    "SYSTEM_GROUP",
    "build_route_registry",
    "register_routes_from_registry",
]
