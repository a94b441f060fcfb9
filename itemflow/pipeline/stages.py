"""Stage contracts.

Two kinds of stage plug into the pipeline:

- PreProcessor: called with the request before the handler; may observe it
  or raise to abort the request. Used for global and route-scoped stages.
- Interceptor: wraps the rest of the pipeline with before/after logic via
  ``intercept(request, proceed)``.
"""

from collections.abc import Callable
from typing import Protocol, TypeVar

from itemflow.pipeline.request import RequestDescriptor

T = TypeVar("T")


class PreProcessor(Protocol):
    """Logic that runs ahead of interception and the handler."""

    def __call__(self, request: RequestDescriptor) -> None: ...


class Interceptor(Protocol):
    """Symmetric wrapper around the next pipeline step.

    Implementations must call ``proceed`` exactly once and return its result
    (or let its exception propagate) unmodified.
    """

    def intercept(self, request: RequestDescriptor, proceed: Callable[[], T]) -> T: ...
