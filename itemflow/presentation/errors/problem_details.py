"""RFC 7807 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(
        ...     field="item_id",
        ...     code="invalid_path_parameter",
        ...     message="Path parameter 'item_id' must be an integer",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for format errors)
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> ProblemDetails(
        ...     type="about:blank/errors/item_not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Item 42 does not exist",
        ...     instance="/items/42",
        ... )
    """

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code", ge=400, le=599)
    detail: str = Field(..., description="Explanation specific to this occurrence")
    instance: str = Field(..., description="Request path of this occurrence")
    errors: list[ErrorDetail] | None = Field(
        None, description="Field-specific errors"
    )
    trace_id: str | None = Field(None, description="Request trace ID")
