"""Interception stages.

An interceptor runs logic immediately before the rest of the pipeline and
immediately after it settles, whether it returned or raised. It observes the
outcome and never changes it.

Architecture:
    ScopedInterceptor implements ``intercept`` once around a try/except scope;
    subclasses only provide ``before`` and ``after``. compose_interceptors
    nests a declared sequence onion-style:

        before(A) -> before(B) -> handler -> after(B) -> after(A)

Usage:
    result = compose_interceptors(
        [LoggingInterceptor(logger)], request, lambda: handler(**kwargs)
    )
"""

import functools
import time
from collections.abc import Callable, Sequence
from typing import Any, ClassVar, TypeVar

from itemflow.core.errors import PipelineError
from itemflow.domain.protocols import LoggerProtocol
from itemflow.pipeline.request import RequestDescriptor
from itemflow.pipeline.stages import Interceptor

T = TypeVar("T")


class ScopedInterceptor:
    """Base class for before/proceed/after interceptors.

    ``after`` runs on every exit path of ``proceed``: normal return and
    exception alike. The exception (if any) is passed to ``after`` for
    observation and then re-raised unchanged. If ``after`` itself raises
    while an exception is in flight, the original exception is re-raised
    with a note describing the after-logic failure.

    Attributes:
        name: Registry name routes use to request this interceptor.
    """

    name: ClassVar[str]

    def before(self, request: RequestDescriptor) -> Any:
        """Run before ``proceed``. The return value is handed to ``after``."""
        return None

    def after(
        self,
        request: RequestDescriptor,
        state: Any,
        error: BaseException | None,
    ) -> None:
        """Run after ``proceed`` settles.

        Args:
            request: The intercepted request.
            state: Whatever ``before`` returned.
            error: The exception ``proceed`` raised, or None on success.
        """
        return None

    def intercept(self, request: RequestDescriptor, proceed: Callable[[], T]) -> T:
        state = self.before(request)
        try:
            result = proceed()
        except BaseException as exc:
            try:
                self.after(request, state, exc)
            except Exception as after_error:
                # The original error is re-raised; the after failure becomes a note.
                exc.add_note(
                    f"{type(self).__name__}.after failed: {after_error!r}"
                )
            raise
        self.after(request, state, None)
        return result


class LoggingInterceptor(ScopedInterceptor):
    """Log each handler invocation with its elapsed time and outcome."""

    name = "logging"

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger.bind(stage="interceptor", interceptor=self.name)

    def before(self, request: RequestDescriptor) -> float:
        self._logger.info(
            "Before handler",
            method=request.method,
            path=request.path,
            trace_id=request.trace_id,
        )
        return time.perf_counter()

    def after(
        self,
        request: RequestDescriptor,
        state: float,
        error: BaseException | None,
    ) -> None:
        elapsed_ms = round((time.perf_counter() - state) * 1000, 3)
        context: dict[str, Any] = {
            "method": request.method,
            "path": request.path,
            "trace_id": request.trace_id,
            "elapsed_ms": elapsed_ms,
            "outcome": "ok" if error is None else "error",
        }
        if error is not None:
            context["error_type"] = type(error).__name__
        self._logger.info("After handler", **context)


def compose_interceptors(
    interceptors: Sequence[Interceptor],
    request: RequestDescriptor,
    terminal: Callable[[], T],
) -> T:
    """Run ``terminal`` inside the given interceptors.

    The first interceptor is the outermost: its before-logic runs first and
    its after-logic runs last.

    Args:
        interceptors: Interceptors in declaration order.
        request: Request handed to every interceptor.
        terminal: The innermost step (binding + handler).

    Returns:
        Whatever ``terminal`` returned.

    Raises:
        PipelineError: If an interceptor calls ``proceed`` more than once.
        Exception: Whatever ``terminal`` or an interceptor raised.
    """
    call: Callable[[], T] = _call_once(terminal, "handler")
    for interceptor in reversed(interceptors):
        call = _call_once(
            functools.partial(interceptor.intercept, request, call),
            type(interceptor).__name__,
        )
    return call()


def _call_once(step: Callable[[], T], label: str) -> Callable[[], T]:
    called = False

    def proceed() -> T:
        nonlocal called
        if called:
            raise PipelineError(f"proceed() called more than once for {label}")
        called = True
        return step()

    return proceed
