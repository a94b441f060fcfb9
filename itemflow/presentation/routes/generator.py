"""Route generator for the Route Registry.

register_routes_from_registry() mounts RouteMetadata entries on a FastAPI
router. FastAPI acts purely as the transport: each generated endpoint turns
the Starlette request into a RequestDescriptor, hands it to the pipeline
together with the route's metadata, and maps the outcome to a response.

Outcome mapping:
    result is None  -> absent-signal, RFC 7807 404 (route.absent_status)
    anything else   -> JSON body with route.status_code
    exception       -> propagates to the registered exception handlers

Usage:
    router = APIRouter()
    register_routes_from_registry(router, registry, pipeline, errors=builder)
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from itemflow.core.enums import ErrorCode
from itemflow.core.errors import NotFoundError
from itemflow.pipeline.binding import parse_int
from itemflow.pipeline.orchestrator import Pipeline
from itemflow.pipeline.request import RequestDescriptor
from itemflow.pipeline.routing import ErrorSpec, RouteMetadata
from itemflow.presentation.errors.error_response_builder import ErrorResponseBuilder


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
    pipeline: Pipeline,
    *,
    errors: ErrorResponseBuilder,
) -> None:
    """Generate FastAPI routes from registry metadata.

    Every route is validated against the pipeline first, so a registry entry
    naming an unknown interceptor fails at startup rather than per request.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: RouteMetadata entries to convert into routes
        pipeline: Pipeline that executes each matched request
        errors: Builder for the absent-signal (404) response

    Raises:
        StageConfigurationError: If a route names an unregistered interceptor.
    """
    for metadata in registry:
        pipeline.validate_route(metadata)

        responses = _build_responses(metadata.errors) if metadata.errors else None
        openapi_extra = _build_openapi_extra(metadata)

        router.add_api_route(
            path=metadata.path,
            endpoint=_build_endpoint(metadata, pipeline, errors),
            methods=[metadata.method.value],
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            openapi_extra=openapi_extra,
        )


def _build_endpoint(
    metadata: RouteMetadata,
    pipeline: Pipeline,
    errors: ErrorResponseBuilder,
) -> Callable[[Request], Awaitable[Response]]:
    """Build the FastAPI endpoint that runs ``metadata`` through the pipeline."""

    async def endpoint(request: Request) -> Response:
        trace_id = getattr(request.state, "trace_id", None)
        descriptor = RequestDescriptor(
            method=request.method,
            path=request.url.path,
            path_params={
                key: str(value) for key, value in request.path_params.items()
            },
            body=await request.body() if metadata.body_model is not None else None,
            trace_id=trace_id,
        )

        result = pipeline.dispatch(descriptor, metadata)

        if result is None:
            return errors.from_not_found(
                _absent(metadata, descriptor),
                instance=descriptor.path,
                trace_id=trace_id,
                status_code=metadata.absent_status,
            )
        return JSONResponse(status_code=metadata.status_code, content=result)

    endpoint.__name__ = metadata.operation_id or f"{metadata.resource}_endpoint"
    return endpoint


def _absent(metadata: RouteMetadata, request: RequestDescriptor) -> NotFoundError:
    resource_id = ",".join(request.path_params.values()) or "-"
    code = (
        ErrorCode.ITEM_NOT_FOUND
        if metadata.resource == "items"
        else ErrorCode.RESOURCE_NOT_FOUND
    )
    return NotFoundError(
        code=code,
        message=f"No such resource: {metadata.resource}/{resource_id}",
        resource_type=metadata.resource,
        resource_id=resource_id,
    )


def _build_openapi_extra(metadata: RouteMetadata) -> dict[str, Any] | None:
    """Describe the path parameters and JSON body the pipeline binds.

    The generic endpoint only takes the raw Request (binding happens inside
    the pipeline), so FastAPI cannot infer these from its signature.
    """
    extra: dict[str, Any] = {}
    if metadata.path_params:
        extra["parameters"] = [
            {
                "name": name,
                "in": "path",
                "required": True,
                "schema": {"type": "integer" if parser is parse_int else "string"},
            }
            for name, parser in metadata.path_params.items()
        ]
    if metadata.body_model is not None:
        extra["requestBody"] = {
            "required": True,
            "content": {
                "application/json": {
                    "schema": metadata.body_model.model_json_schema()
                }
            },
        }
    return extra or None


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Item not found")])
        {404: {'description': 'Item not found'}}
    """
    return {error.status: {"description": error.description} for error in errors}
