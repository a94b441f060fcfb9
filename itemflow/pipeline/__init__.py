"""Request pipeline: stage contracts, stages, projection and orchestration.

Usage:
    from itemflow.pipeline import Pipeline, RequestDescriptor, RouteMetadata
"""

from itemflow.pipeline.binding import bind_arguments, parse_int
from itemflow.pipeline.interceptors import (
    LoggingInterceptor,
    ScopedInterceptor,
    compose_interceptors,
)
from itemflow.pipeline.orchestrator import Pipeline
from itemflow.pipeline.preprocessors import RequestLogger
from itemflow.pipeline.request import RequestDescriptor
from itemflow.pipeline.routing import ErrorSpec, HTTPMethod, RouteMetadata
from itemflow.pipeline.serialization import (
    SerializationFilter,
    Visibility,
    VisibilitySchema,
)
from itemflow.pipeline.stages import Interceptor, PreProcessor

__all__ = [
    "ErrorSpec",
    "HTTPMethod",
    "Interceptor",
    "LoggingInterceptor",
    "Pipeline",
    "PreProcessor",
    "RequestDescriptor",
    "RequestLogger",
    "RouteMetadata",
    "ScopedInterceptor",
    "SerializationFilter",
    "Visibility",
    "VisibilitySchema",
    "bind_arguments",
    "compose_interceptors",
    "parse_int",
]
