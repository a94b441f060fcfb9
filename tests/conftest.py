"""Pytest configuration and shared fixtures.

Fixtures:
- settings: Settings for the testing environment (JSON logs, defaults)
- recording_logger: LoggerProtocol double that records every call
- store / pipeline / app / client: a fully wired application per test, so
  no state leaks between tests
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from itemflow.core.config import Settings
from itemflow.core.container import build_item_store, build_pipeline
from itemflow.core.enums import Environment
from itemflow.main import create_app


class RecordingLogger:
    """LoggerProtocol implementation that records calls instead of emitting.

    Bound loggers share the parent's ``records`` list, so the order of
    events across every stage can be asserted from one place.

    Attributes:
        records: (level, message, context) tuples in call order.
    """

    def __init__(
        self,
        records: list[tuple[str, str, dict[str, Any]]] | None = None,
        bound: dict[str, Any] | None = None,
    ) -> None:
        self.records = records if records is not None else []
        self._bound = bound or {}

    def _record(self, level: str, message: str, context: dict[str, Any]) -> None:
        self.records.append((level, message, {**self._bound, **context}))

    def debug(self, message: str, /, **context: Any) -> None:
        self._record("debug", message, context)

    def info(self, message: str, /, **context: Any) -> None:
        self._record("info", message, context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._record("warning", message, context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
        self._record("error", message, context)

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        if error is not None:
            context["error_type"] = type(error).__name__
        self._record("critical", message, context)

    def bind(self, **context: Any) -> RecordingLogger:
        return RecordingLogger(self.records, {**self._bound, **context})

    def with_context(self, **context: Any) -> RecordingLogger:
        return self.bind(**context)

    def messages(self, **match: Any) -> list[str]:
        """Return recorded messages whose context contains ``match``."""
        return [
            message
            for _, message, context in self.records
            if all(context.get(key) == value for key, value in match.items())
        ]


@pytest.fixture
def settings() -> Settings:
    return Settings(environment=Environment.TESTING)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def store(recording_logger):
    return build_item_store(recording_logger)


@pytest.fixture
def pipeline(recording_logger):
    return build_pipeline(recording_logger)


@pytest.fixture
def app(settings, store, recording_logger, pipeline):
    return create_app(settings, store=store, logger=recording_logger, pipeline=pipeline)


@pytest.fixture
def client(app) -> TestClient:
    """TestClient that returns 500 responses instead of re-raising faults."""
    return TestClient(app, raise_server_exceptions=False)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no transport")
    config.addinivalue_line("markers", "api: HTTP-level tests through TestClient")
