"""Core errors package.

Exports all core-level error classes for convenient importing.

Two families live here:
- Data errors (DomainError and subclasses): frozen dataclasses describing
  what went wrong. They are values, never raised on their own.
- Pipeline exceptions (PipelineError and subclasses): raised inside the
  request pipeline and carrying a data error as payload.

Usage:
    from itemflow.core.errors import RequestFormatError, ValidationError
"""

from itemflow.core.errors.common_errors import NotFoundError, ValidationError
from itemflow.core.errors.domain_error import DomainError
from itemflow.core.errors.pipeline_errors import (
    PipelineError,
    RequestFormatError,
    StageConfigurationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "PipelineError",
    "RequestFormatError",
    "StageConfigurationError",
]
