"""Request binding: raw request -> handler keyword arguments.

Binding is the last step before the handler and runs inside the interceptor
scope, so a malformed request still triggers every interceptor's
after-logic. Binding only coerces primitives; it never touches the store.

Failures raise RequestFormatError carrying one ValidationError per problem.
Path parameter errors and body errors are collected together.
"""

import json
import re
from typing import Any

import pydantic

from itemflow.core.enums import ErrorCode
from itemflow.core.errors import RequestFormatError, ValidationError
from itemflow.pipeline.request import RequestDescriptor
from itemflow.pipeline.routing import RouteMetadata

_INTEGER = re.compile(r"-?[0-9]+")


def parse_int(raw: str) -> int:
    """Parse a base-10 integer path parameter.

    Stricter than ``int()``: no surrounding whitespace, no underscores,
    no leading ``+``.

    Raises:
        ValueError: If ``raw`` is not an optionally signed run of digits.
    """
    if not _INTEGER.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    return int(raw)


def bind_arguments(request: RequestDescriptor, route: RouteMetadata) -> dict[str, Any]:
    """Build the handler's keyword arguments for ``request``.

    Args:
        request: Incoming request.
        route: Matched route (declares path parameters and body model).

    Returns:
        dict[str, Any]: Path parameters by name, plus ``body`` when the route
            declares a body model.

    Raises:
        RequestFormatError: If any parameter or the body is malformed.
    """
    arguments: dict[str, Any] = {}
    errors: list[ValidationError] = []

    for name, parser in route.path_params.items():
        raw = request.path_params.get(name)
        if raw is None:
            errors.append(
                ValidationError(
                    code=ErrorCode.FIELD_REQUIRED,
                    message=f"Path parameter '{name}' is required",
                    field=name,
                )
            )
            continue
        try:
            arguments[name] = parser(raw)
        except ValueError:
            errors.append(
                ValidationError(
                    code=ErrorCode.INVALID_PATH_PARAMETER,
                    message=f"Path parameter '{name}' must be an integer",
                    field=name,
                    details={"value": raw},
                )
            )

    if route.body_model is not None:
        body, body_errors = _bind_body(request.body, route.body_model)
        errors.extend(body_errors)
        if body is not None:
            arguments["body"] = body

    if errors:
        raise RequestFormatError(errors)
    return arguments


def _bind_body(
    raw: bytes | None, model: type[pydantic.BaseModel]
) -> tuple[pydantic.BaseModel | None, list[ValidationError]]:
    data: Any = {}
    if raw and raw.strip():
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError):
            return None, [
                ValidationError(
                    code=ErrorCode.INVALID_JSON,
                    message="Request body is not valid JSON",
                    field="body",
                )
            ]
    if not isinstance(data, dict):
        return None, [
            ValidationError(
                code=ErrorCode.INVALID_BODY,
                message="Request body must be a JSON object",
                field="body",
            )
        ]

    try:
        return model.model_validate(data), []
    except pydantic.ValidationError as exc:
        return None, [_from_pydantic(error) for error in exc.errors()]


def _from_pydantic(error: Any) -> ValidationError:
    field = ".".join(str(part) for part in error["loc"]) or "body"
    code = (
        ErrorCode.FIELD_REQUIRED
        if error["type"] == "missing"
        else ErrorCode.VALIDATION_FAILED
    )
    return ValidationError(code=code, message=error["msg"], field=field)
