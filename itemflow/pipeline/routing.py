"""Route metadata: the router's resolution handed to the pipeline.

A RouteMetadata entry is the single description of a route. The route
registry declares them, the generator mounts them on FastAPI, and the
orchestrator reads the stage configuration from them.

Core types:
    RouteMetadata: Method, path, handler, route group, interceptor names,
        request binding (path parameter parsers, body model) and OpenAPI docs
    HTTPMethod: HTTP method enum
    ErrorSpec: Error response specification for OpenAPI

Usage:
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/items/{item_id}",
        handler=items.get_item,
        group="items",
        resource="items",
        tags=["Items"],
        summary="Get item",
        interceptors=("logging",),
        path_params={"item_id": parse_int},
    )
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for routes.

    Attributes:
        GET: Safe, idempotent read operations
        POST: Non-idempotent create operations
        PUT: Idempotent complete replacement
        DELETE: Idempotent delete operations
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 500)
        description: Human-readable error description
    """

    status: int
    description: str


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for a route.

    Identity fields:
        method: HTTP method
        path: URL path with placeholders (e.g., "/items/{item_id}")
        handler: Business logic; receives the bound arguments as keywords

    Pipeline fields:
        group: Route group; selects the route-scoped pre-processing stages
        interceptors: Interceptor names, outermost first
        path_params: Path parameter name -> parser (raises ValueError on
            malformed input)
        body_model: Pydantic model the JSON body is validated against; the
            instance is passed to the handler as ``body``

    Response fields:
        status_code: Success status
        absent_status: Status used when the handler returns None
        errors: Possible error responses for OpenAPI

    OpenAPI documentation:
        resource, tags, summary, description, operation_id
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Any]

    # Pipeline
    group: str
    interceptors: Sequence[str] = ()
    path_params: Mapping[str, Callable[[str], Any]] = field(default_factory=dict)
    body_model: type[BaseModel] | None = None

    # Response
    status_code: int = 200
    absent_status: int = 404
    errors: list[ErrorSpec] | None = None

    # OpenAPI documentation
    resource: str
    tags: Sequence[str]
    summary: str
    description: str | None = None
    operation_id: str | None = None

    @property
    def key(self) -> str:
        """Endpoint key, e.g. ``"GET /items/{item_id}"``."""
        return f"{self.method.value} {self.path}"
