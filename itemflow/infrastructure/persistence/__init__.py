"""Process-lifetime persistence adapters."""

from itemflow.infrastructure.persistence.item_store import InMemoryItemStore

__all__ = ["InMemoryItemStore"]
