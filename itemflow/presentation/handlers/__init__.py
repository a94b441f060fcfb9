"""Route handlers (business logic invoked by the pipeline)."""

from itemflow.presentation.handlers.items import ItemsController
from itemflow.presentation.handlers.system import SystemController

__all__ = ["ItemsController", "SystemController"]
