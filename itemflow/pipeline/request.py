"""Transport-independent request descriptor.

The pipeline never sees Starlette objects: the transport builds a
RequestDescriptor and hands it to the orchestrator.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestDescriptor:
    """What the pipeline knows about one incoming request.

    Attributes:
        method: HTTP method, upper-case.
        path: Request path (no query string).
        path_params: Raw (string) path parameters captured by the router.
        body: Raw request body, or None when the request carries none.
        trace_id: Correlation id assigned by the transport.
    """

    method: str
    path: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    trace_id: str | None = None
