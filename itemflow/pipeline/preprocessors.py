"""Pre-processing stages.

RequestLogger is used twice in the default wiring: once as the global stage
(sees every request, including unmatched paths) and once scoped to the
``items`` route group.
"""

from itemflow.domain.protocols import LoggerProtocol
from itemflow.pipeline.request import RequestDescriptor


class RequestLogger:
    """Log the method and path of each request it sees.

    Args:
        logger: Structured logger.
        stage: Label identifying where the stage is wired ("global", or the
            route group name).
    """

    def __init__(self, logger: LoggerProtocol, *, stage: str) -> None:
        self.stage = stage
        self._logger = logger.bind(stage=stage)

    def __call__(self, request: RequestDescriptor) -> None:
        self._logger.info(
            "Request received",
            method=request.method,
            path=request.path,
            trace_id=request.trace_id,
        )
