"""Global stage middleware.

Runs the pipeline's global pre-processing stages for every HTTP request
before routing happens, so they also observe requests that match no route
(404s). Also assigns the request trace ID:

- Reuses the X-Trace-Id request header when present, otherwise generates one
- Stores it on ``request.state.trace_id`` for handlers and error responses
- Binds it into structlog contextvars for the duration of the request
- Echoes it in the X-Trace-Id response header
"""

from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from itemflow.pipeline.orchestrator import Pipeline
from itemflow.pipeline.request import RequestDescriptor

TRACE_HEADER = "X-Trace-Id"


class GlobalStageMiddleware(BaseHTTPMiddleware):
    """Starlette middleware running global stages ahead of routing.

    Args:
        app: The ASGI application to wrap.
        pipeline: Pipeline whose global stages run for every request.
    """

    def __init__(self, app: ASGIApp, *, pipeline: Pipeline) -> None:
        super().__init__(app)
        self._pipeline = pipeline

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Assign a trace ID, run global stages, then continue to routing.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Downstream response with X-Trace-Id header added.
        """
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id

        with structlog.contextvars.bound_contextvars(trace_id=trace_id):
            self._pipeline.observe(
                RequestDescriptor(
                    method=request.method,
                    path=request.url.path,
                    trace_id=trace_id,
                )
            )
            response = await call_next(request)

        response.headers[TRACE_HEADER] = trace_id
        return response
