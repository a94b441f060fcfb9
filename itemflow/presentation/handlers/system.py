"""System handlers for non-resource endpoints.

These routes live in the ``system`` route group: they receive global
pre-processing but none of the item group's stages.
"""

from collections.abc import Sequence


class SystemController:
    """Root info and health endpoints.

    Args:
        app_name: Application name reported by the root endpoint.
        endpoints: Endpoint keys (e.g. "GET /items") advertised by the root
            endpoint.
    """

    def __init__(self, *, app_name: str, endpoints: Sequence[str]) -> None:
        self._app_name = app_name
        self._endpoints = list(endpoints)

    def info(self) -> dict[str, object]:
        """Return the application name and the item endpoints."""
        return {
            "message": f"{self._app_name} request pipeline demo",
            "endpoints": list(self._endpoints),
        }

    def health(self) -> dict[str, str]:
        return {"status": "healthy"}
