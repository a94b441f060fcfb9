"""Error response builder for RFC 7807 Problem Details.

Builds the JSON responses for the three client-visible failure outcomes:
format errors (400), absent resources (404) and unexpected faults (500).

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import status
from fastapi.responses import JSONResponse

from itemflow.core.enums import ErrorCode
from itemflow.core.errors import NotFoundError, RequestFormatError
from itemflow.presentation.errors.problem_details import ErrorDetail, ProblemDetails


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Args:
        type_base_url: Base URI for the ``type`` field (from settings).
    """

    def __init__(self, type_base_url: str) -> None:
        self._type_base_url = type_base_url

    def from_request_format_error(
        self, error: RequestFormatError, *, instance: str, trace_id: str | None
    ) -> JSONResponse:
        """Convert a RequestFormatError to a 400 response with per-field errors."""
        problem = ProblemDetails(
            type=self._type_url(ErrorCode.VALIDATION_FAILED),
            title="Validation Failed",
            status=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
            instance=instance,
            errors=[
                ErrorDetail(
                    field=validation.field or "unknown",
                    code=validation.code.value,
                    message=validation.message,
                )
                for validation in error.errors
            ],
            trace_id=trace_id,
        )
        return self._respond(problem)

    def from_not_found(
        self,
        error: NotFoundError,
        *,
        instance: str,
        trace_id: str | None,
        status_code: int = status.HTTP_404_NOT_FOUND,
    ) -> JSONResponse:
        """Convert an absent-signal description to a 404 response."""
        problem = ProblemDetails(
            type=self._type_url(error.code),
            title="Resource Not Found",
            status=status_code,
            detail=error.message,
            instance=instance,
            trace_id=trace_id,
        )
        return self._respond(problem)

    def internal_error(self, *, instance: str, trace_id: str | None) -> JSONResponse:
        """Build a 500 response that leaks no internal details."""
        problem = ProblemDetails(
            type=self._type_url(ErrorCode.INTERNAL_ERROR),
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please contact support with the trace ID.",
            instance=instance,
            trace_id=trace_id,
        )
        return self._respond(problem)

    def _type_url(self, code: ErrorCode) -> str:
        return f"{self._type_base_url}/errors/{code.value}"

    @staticmethod
    def _respond(problem: ProblemDetails) -> JSONResponse:
        return JSONResponse(
            status_code=problem.status,
            content=problem.model_dump(exclude_none=True),
            media_type="application/problem+json",
        )
