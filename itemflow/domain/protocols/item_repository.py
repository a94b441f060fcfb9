"""ItemRepository protocol.

Contract for the authoritative item store. "Not found" is a normal outcome
(None or False), never an exception.
"""

from typing import Protocol

from itemflow.domain.entities import Item


class ItemRepository(Protocol):
    """CRUD store for items keyed by integer id."""

    def list(self) -> list[Item]:
        """Return all items in insertion order."""
        ...

    def get(self, item_id: int) -> Item | None:
        """Return the item, or None when the id is unknown."""
        ...

    def create(self, name: str, description: str | None = None) -> Item:
        """Store a new item with a fresh id and generated secret."""
        ...

    def update(
        self, item_id: int, name: str, description: str | None = None
    ) -> Item | None:
        """Replace an item's name/description, keeping id and secret.

        Returns None (and changes nothing) when the id is unknown.
        """
        ...

    def remove(self, item_id: int) -> bool:
        """Delete an item. Returns False when the id is unknown."""
        ...
