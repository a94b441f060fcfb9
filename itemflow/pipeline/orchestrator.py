"""Pipeline orchestrator.

Runs one request through the stages in a fixed order:

    1. Global pre-processing       (every request)
    2. Route-scoped pre-processing (only the matched route's group)
    3. Interception, before        (route's interceptors, outermost first)
    4. Binding + handler           (exactly once)
    5. Interception, after         (innermost first, on every outcome)
    6. Response projection         (success only)
    7. Emission                    (returned / raised to the transport)

Step 1 is exposed separately as ``observe`` so the transport can run it from
middleware wired ahead of routing; global stages then also see requests that
never match a route. ``dispatch`` runs steps 2 to 6 for a matched route and
``execute`` runs all of them.

An exception from any step aborts the steps after it. Interceptors already
entered still run their after-logic, and projection is skipped.
"""

import functools
from collections.abc import Mapping, Sequence
from typing import Any

from itemflow.core.errors import StageConfigurationError
from itemflow.pipeline.binding import bind_arguments
from itemflow.pipeline.interceptors import compose_interceptors
from itemflow.pipeline.request import RequestDescriptor
from itemflow.pipeline.routing import RouteMetadata
from itemflow.pipeline.serialization import SerializationFilter
from itemflow.pipeline.stages import Interceptor, PreProcessor


class Pipeline:
    """Deterministic per-request stage composition.

    Args:
        serialization: Filter applied to successful handler results.
        global_stages: Pre-processors run for every request, in order.
        group_stages: Route group -> pre-processors run (in order) only for
            routes in that group.
        interceptors: Interceptor name -> instance; routes reference
            interceptors by name.

    Example:
        >>> pipeline = Pipeline(
        ...     serialization=SerializationFilter({Item: ITEM_VISIBILITY}),
        ...     global_stages=[RequestLogger(logger, stage="global")],
        ...     group_stages={"items": [RequestLogger(logger, stage="items")]},
        ...     interceptors={"logging": LoggingInterceptor(logger)},
        ... )
        >>> pipeline.execute(request, route)
    """

    def __init__(
        self,
        *,
        serialization: SerializationFilter,
        global_stages: Sequence[PreProcessor] = (),
        group_stages: Mapping[str, Sequence[PreProcessor]] | None = None,
        interceptors: Mapping[str, Interceptor] | None = None,
    ) -> None:
        self._serialization = serialization
        self._global_stages = tuple(global_stages)
        self._group_stages = {
            group: tuple(stages) for group, stages in (group_stages or {}).items()
        }
        self._interceptors = dict(interceptors or {})

    def observe(self, request: RequestDescriptor) -> None:
        """Run the global pre-processing stages (step 1)."""
        for stage in self._global_stages:
            stage(request)

    def dispatch(self, request: RequestDescriptor, route: RouteMetadata) -> Any:
        """Run steps 2 to 6 for a request matched to ``route``.

        Args:
            request: Incoming request.
            route: Router's resolution for the request.

        Returns:
            Any: The projected handler result. None (absent-signal) passes
                through unchanged.

        Raises:
            RequestFormatError: If binding rejects the request.
            StageConfigurationError: If the route names an unknown interceptor.
            Exception: Anything a stage or the handler raised.
        """
        for stage in self._group_stages.get(route.group, ()):
            stage(request)

        result = compose_interceptors(
            self._interceptors_for(route),
            request,
            functools.partial(self._invoke_handler, request, route),
        )
        return self._serialization.apply(result)

    def execute(self, request: RequestDescriptor, route: RouteMetadata) -> Any:
        """Run the whole sequence (global stages included) for ``request``."""
        self.observe(request)
        return self.dispatch(request, route)

    def validate_route(self, route: RouteMetadata) -> None:
        """Fail fast on routes naming interceptors that are not registered.

        Raises:
            StageConfigurationError: On the first unknown interceptor name.
        """
        self._interceptors_for(route)

    def _interceptors_for(self, route: RouteMetadata) -> list[Interceptor]:
        resolved = []
        for name in route.interceptors:
            interceptor = self._interceptors.get(name)
            if interceptor is None:
                raise StageConfigurationError(name, route=route.key)
            resolved.append(interceptor)
        return resolved

    def _invoke_handler(self, request: RequestDescriptor, route: RouteMetadata) -> Any:
        arguments = bind_arguments(request, route)
        return route.handler(**arguments)
