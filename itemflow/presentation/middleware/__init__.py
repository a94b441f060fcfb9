"""Starlette middleware wired ahead of routing."""

from itemflow.presentation.middleware.global_stage_middleware import (
    TRACE_HEADER,
    GlobalStageMiddleware,
)

__all__ = ["GlobalStageMiddleware", "TRACE_HEADER"]
