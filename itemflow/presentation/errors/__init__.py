"""RFC 7807 error responses and exception handlers."""

from itemflow.presentation.errors.error_response_builder import ErrorResponseBuilder
from itemflow.presentation.errors.exception_handlers import register_exception_handlers
from itemflow.presentation.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
