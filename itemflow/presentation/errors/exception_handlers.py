"""Global exception handlers for the FastAPI application.

Maps exceptions surfacing from the pipeline to RFC 7807 responses:
- RequestFormatError -> 400 with per-field errors (logged at warning)
- Any other exception -> 500 without internal details (logged at error)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from itemflow.core.errors import RequestFormatError
from itemflow.domain.protocols import LoggerProtocol
from itemflow.presentation.errors.error_response_builder import ErrorResponseBuilder


def register_exception_handlers(
    app: FastAPI, *, builder: ErrorResponseBuilder, logger: LoggerProtocol
) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
        builder: Problem Details response builder
        logger: Logger for rejected requests and faults
    """

    async def request_format_error_handler(
        request: Request, exc: RequestFormatError
    ) -> JSONResponse:
        trace_id = getattr(request.state, "trace_id", None)
        logger.warning(
            "Request rejected",
            method=request.method,
            path=request.url.path,
            trace_id=trace_id,
            fields=[error.field for error in exc.errors],
        )
        return builder.from_request_format_error(
            exc, instance=request.url.path, trace_id=trace_id
        )

    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        trace_id = getattr(request.state, "trace_id", None)
        logger.error(
            "Unhandled exception",
            error=exc,
            method=request.method,
            path=request.url.path,
            trace_id=trace_id,
        )
        return builder.internal_error(instance=request.url.path, trace_id=trace_id)

    app.add_exception_handler(RequestFormatError, request_format_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
