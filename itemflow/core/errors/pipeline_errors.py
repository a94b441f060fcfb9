"""Exceptions raised inside the request pipeline.

Error Types:
- PipelineError: Base class for pipeline exceptions
- RequestFormatError: Malformed request, rejected before the handler runs
- StageConfigurationError: Route references a stage that is not registered
"""

from collections.abc import Sequence

from itemflow.core.errors.common_errors import ValidationError


class PipelineError(Exception):
    """Base exception for request pipeline failures."""

    pass


class RequestFormatError(PipelineError):
    """Request could not be bound to handler arguments.

    Raised by request binding (inside the interceptor scope) when a path
    parameter fails integer coercion or the body is missing, not JSON, or
    fails validation. Carries one ValidationError per offending field.

    Attributes:
        errors: Field-level validation errors (at least one).
    """

    def __init__(self, errors: Sequence[ValidationError]) -> None:
        if not errors:
            raise ValueError("RequestFormatError requires at least one error")
        self.errors: tuple[ValidationError, ...] = tuple(errors)
        super().__init__(self.errors[0].message)


class StageConfigurationError(PipelineError):
    """A route names an interceptor the pipeline does not know."""

    def __init__(self, stage_name: str, *, route: str | None = None) -> None:
        self.stage_name = stage_name
        self.route = route
        where = f" (route {route})" if route else ""
        super().__init__(f"Stage not registered: {stage_name}{where}")
