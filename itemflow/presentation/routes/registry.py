"""Route Registry - single source of truth for all routes.

The registry is an explicit table: each RouteMetadata entry binds method and
path to a handler and declares which stages apply (route group and
interceptor names). Handlers are bound methods of controller instances
created once at startup, so the registry is built by a function that takes
those instances.

Route groups:
    items:  item CRUD; route-scoped request logging + logging interceptor
    system: root info and health; global stages only

Usage:
    items = ItemsController(store)
    registry = build_route_registry(items, app_name=settings.app_name)
    register_routes_from_registry(router, registry, pipeline)
"""

from itemflow.pipeline.binding import parse_int
from itemflow.pipeline.routing import ErrorSpec, HTTPMethod, RouteMetadata
from itemflow.presentation.handlers import ItemsController, SystemController
from itemflow.schemas.item_schemas import ItemCreateRequest, ItemUpdateRequest

ITEMS_GROUP = "items"
SYSTEM_GROUP = "system"

# Interceptors applied to every item route, outermost first.
ITEM_INTERCEPTORS = ("logging",)

_ITEM_ID = {"item_id": parse_int}
_FORMAT_ERROR = ErrorSpec(status=400, description="Malformed id or request body")
_NOT_FOUND = ErrorSpec(status=404, description="Item not found")


def build_item_routes(items: ItemsController) -> list[RouteMetadata]:
    """Return the item CRUD routes bound to ``items``."""
    common = {
        "group": ITEMS_GROUP,
        "interceptors": ITEM_INTERCEPTORS,
        "resource": "items",
        "tags": ["Items"],
    }
    return [
        RouteMetadata(
            method=HTTPMethod.GET,
            path="/items",
            handler=items.list_items,
            summary="List items",
            operation_id="list_items",
            **common,
        ),
        RouteMetadata(
            method=HTTPMethod.GET,
            path="/items/{item_id}",
            handler=items.get_item,
            path_params=_ITEM_ID,
            summary="Get item",
            operation_id="get_item",
            errors=[_FORMAT_ERROR, _NOT_FOUND],
            **common,
        ),
        RouteMetadata(
            method=HTTPMethod.POST,
            path="/items",
            handler=items.create_item,
            body_model=ItemCreateRequest,
            status_code=201,
            summary="Create item",
            operation_id="create_item",
            errors=[_FORMAT_ERROR],
            **common,
        ),
        RouteMetadata(
            method=HTTPMethod.PUT,
            path="/items/{item_id}",
            handler=items.update_item,
            path_params=_ITEM_ID,
            body_model=ItemUpdateRequest,
            summary="Update item",
            description="Replace an item's name and description. The id and "
            "internal fields are preserved.",
            operation_id="update_item",
            errors=[_FORMAT_ERROR, _NOT_FOUND],
            **common,
        ),
        RouteMetadata(
            method=HTTPMethod.DELETE,
            path="/items/{item_id}",
            handler=items.delete_item,
            path_params=_ITEM_ID,
            summary="Delete item",
            description='Returns {"deleted": false} when the item does not exist.',
            operation_id="delete_item",
            errors=[_FORMAT_ERROR],
            **common,
        ),
    ]


def build_system_routes(system: SystemController) -> list[RouteMetadata]:
    """Return the root info and health routes bound to ``system``."""
    common = {"group": SYSTEM_GROUP, "resource": "system", "tags": ["System"]}
    return [
        RouteMetadata(
            method=HTTPMethod.GET,
            path="/",
            handler=system.info,
            summary="Application info",
            operation_id="get_info",
            **common,
        ),
        RouteMetadata(
            method=HTTPMethod.GET,
            path="/health",
            handler=system.health,
            summary="Health check",
            operation_id="get_health",
            **common,
        ),
    ]


def build_route_registry(items: ItemsController, *, app_name: str) -> list[RouteMetadata]:
    """Return every route: item routes first, then system routes.

    The root endpoint advertises the item routes' endpoint keys.
    """
    item_routes = build_item_routes(items)
    system = SystemController(
        app_name=app_name,
        endpoints=[route.key for route in item_routes],
    )
    return item_routes + build_system_routes(system)
