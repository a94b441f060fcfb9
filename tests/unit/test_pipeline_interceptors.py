"""Unit tests for interception stages.

Tests cover:
- before/after run around proceed, after runs on success and on failure
- Results and exceptions pass through unchanged
- Nesting order (before in declaration order, after reversed)
- proceed() may only be called once
- LoggingInterceptor log events
"""

from typing import Any

import pytest

from itemflow.core.errors import PipelineError
from itemflow.pipeline.interceptors import (
    LoggingInterceptor,
    ScopedInterceptor,
    compose_interceptors,
)
from itemflow.pipeline.request import RequestDescriptor

REQUEST = RequestDescriptor(method="GET", path="/items", trace_id="t-1")


class Recorder(ScopedInterceptor):
    """Interceptor that appends before/after events to a shared list."""

    name = "recorder"

    def __init__(self, label: str, events: list[str]) -> None:
        self.label = label
        self.events = events
        self.after_calls = 0
        self.errors: list[BaseException | None] = []

    def before(self, request: RequestDescriptor) -> str:
        self.events.append(f"before:{self.label}")
        return self.label

    def after(self, request: RequestDescriptor, state: Any, error: BaseException | None) -> None:
        assert state == self.label
        self.after_calls += 1
        self.errors.append(error)
        self.events.append(f"after:{self.label}")


class Boom(Exception):
    pass


def fail() -> None:
    raise Boom("handler failed")


@pytest.mark.unit
class TestScopedInterceptor:
    """Test ScopedInterceptor.intercept()."""

    def test_returns_result_unchanged(self):
        events: list[str] = []
        interceptor = Recorder("a", events)
        result = object()

        assert interceptor.intercept(REQUEST, lambda: result) is result
        assert events == ["before:a", "after:a"]
        assert interceptor.errors == [None]

    def test_after_runs_on_failure_and_error_propagates(self):
        events: list[str] = []
        interceptor = Recorder("a", events)
        error = Boom("handler failed")

        def failing() -> None:
            events.append("handler")
            raise error

        with pytest.raises(Boom) as exc_info:
            interceptor.intercept(REQUEST, failing)

        assert exc_info.value is error
        assert events == ["before:a", "handler", "after:a"]
        assert interceptor.errors == [error]

    def test_after_runs_exactly_once_on_success_and_failure(self):
        interceptor = Recorder("a", [])

        interceptor.intercept(REQUEST, lambda: "ok")
        with pytest.raises(Boom):
            interceptor.intercept(REQUEST, fail)

        assert interceptor.after_calls == 2

    def test_failing_after_logic_does_not_replace_original_error(self):
        class BrokenAfter(ScopedInterceptor):
            name = "broken"

            def after(self, request, state, error):
                raise OSError("log sink down")

        def handler() -> None:
            raise KeyError("original")

        with pytest.raises(KeyError) as exc_info:
            compose_interceptors([BrokenAfter()], REQUEST, handler)

        assert exc_info.value.args == ("original",)
        assert any("log sink down" in note for note in exc_info.value.__notes__)

    def test_failing_after_logic_still_runs_outer_after_logic(self):
        events: list[str] = []
        outer = Recorder("outer", events)

        class BrokenAfter(ScopedInterceptor):
            name = "broken"

            def after(self, request, state, error):
                raise OSError("log sink down")

        with pytest.raises(Boom):
            compose_interceptors([outer, BrokenAfter()], REQUEST, fail)

        assert events == ["before:outer", "after:outer"]
        assert isinstance(outer.errors[0], Boom)

    def test_failing_after_logic_on_success_propagates(self):
        class BrokenAfter(ScopedInterceptor):
            name = "broken"

            def after(self, request, state, error):
                raise OSError("log sink down")

        with pytest.raises(OSError):
            BrokenAfter().intercept(REQUEST, lambda: "ok")

    def test_default_hooks_are_transparent(self):
        class Plain(ScopedInterceptor):
            name = "plain"

        assert Plain().intercept(REQUEST, lambda: 42) == 42


@pytest.mark.unit
class TestComposeInterceptors:
    """Test onion nesting."""

    def test_nesting_order(self):
        events: list[str] = []
        chain = [Recorder("outer", events), Recorder("inner", events)]

        def terminal() -> str:
            events.append("handler")
            return "done"

        assert compose_interceptors(chain, REQUEST, terminal) == "done"
        assert events == [
            "before:outer",
            "before:inner",
            "handler",
            "after:inner",
            "after:outer",
        ]

    def test_nesting_order_on_failure(self):
        events: list[str] = []
        chain = [Recorder("outer", events), Recorder("inner", events)]

        def terminal() -> None:
            raise Boom()

        with pytest.raises(Boom):
            compose_interceptors(chain, REQUEST, terminal)

        assert events == ["before:outer", "before:inner", "after:inner", "after:outer"]

    def test_no_interceptors_calls_terminal(self):
        assert compose_interceptors([], REQUEST, lambda: "bare") == "bare"

    def test_proceed_twice_is_rejected(self):
        class Greedy:
            def intercept(self, request, proceed):
                proceed()
                return proceed()

        calls: list[int] = []

        with pytest.raises(PipelineError):
            compose_interceptors([Greedy()], REQUEST, lambda: calls.append(1))

        assert calls == [1]


@pytest.mark.unit
class TestLoggingInterceptor:
    """Test LoggingInterceptor events."""

    def test_logs_before_and_after_on_success(self, recording_logger):
        interceptor = LoggingInterceptor(recording_logger)

        interceptor.intercept(REQUEST, lambda: "ok")

        before, after = recording_logger.records
        assert before[1] == "Before handler"
        assert before[2]["path"] == "/items"
        assert before[2]["trace_id"] == "t-1"
        assert after[1] == "After handler"
        assert after[2]["outcome"] == "ok"
        assert after[2]["elapsed_ms"] >= 0

    def test_logs_after_with_error_outcome(self, recording_logger):
        interceptor = LoggingInterceptor(recording_logger)

        with pytest.raises(Boom):
            interceptor.intercept(REQUEST, fail)

        after = recording_logger.records[-1]
        assert after[1] == "After handler"
        assert after[2]["outcome"] == "error"
        assert after[2]["error_type"] == "Boom"
