"""In-memory item store.

Implements ItemRepository over a dict keyed by integer id. State lives for
the lifetime of the process only.

Concurrency:
    Every operation runs under one lock, so ids are assigned atomically and
    no reader sees a half-created or half-updated item. Completed operations
    are totally ordered as seen through list() and get().

Ids are never reused: the counter only moves forward, including past ids
whose items have been removed.
"""

import threading

from itemflow.domain.entities import Item
from itemflow.domain.protocols import LoggerProtocol


class InMemoryItemStore:
    """Authoritative CRUD state for items.

    Implements ItemRepository (structural subtyping).

    Args:
        logger: Optional logger for mutation events (debug level).

    Example:
        >>> store = InMemoryItemStore()
        >>> store.create("Widget").id
        1
        >>> store.remove(1), store.remove(1)
        (True, False)
    """

    def __init__(self, *, logger: LoggerProtocol | None = None) -> None:
        self._items: dict[int, Item] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self._logger = logger

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list(self) -> list[Item]:
        """Return a snapshot of all items in insertion order."""
        with self._lock:
            return list(self._items.values())

    def get(self, item_id: int) -> Item | None:
        with self._lock:
            return self._items.get(item_id)

    def create(self, name: str, description: str | None = None) -> Item:
        """Store a new item.

        Args:
            name: Item name.
            description: Optional description.

        Returns:
            Item: The stored item, with a fresh id and generated secret.
        """
        with self._lock:
            item_id = self._next_id
            self._next_id += 1
            item = Item(
                id=item_id,
                name=name,
                description=description,
                internal_secret=_secret_for(item_id),
            )
            self._items[item_id] = item
        self._log("Item created", item_id=item_id)
        return item

    def update(
        self, item_id: int, name: str, description: str | None = None
    ) -> Item | None:
        """Replace an item's name and description.

        The replacement keeps the id, the existing internal secret and the
        item's position in list order.

        Args:
            item_id: Target id.
            name: New name.
            description: New description (None clears it).

        Returns:
            Item | None: The replacement, or None when the id is unknown.
        """
        with self._lock:
            existing = self._items.get(item_id)
            if existing is None:
                return None
            updated = existing.with_changes(name=name, description=description)
            self._items[item_id] = updated
        self._log("Item updated", item_id=item_id)
        return updated

    def remove(self, item_id: int) -> bool:
        with self._lock:
            removed = self._items.pop(item_id, None) is not None
        if removed:
            self._log("Item removed", item_id=item_id)
        return removed

    def _log(self, message: str, **context: int) -> None:
        if self._logger is not None:
            self._logger.debug(message, **context)


def _secret_for(item_id: int) -> str:
    # Demonstration value for the hidden field, not a credential.
    return f"secret-{item_id}"
