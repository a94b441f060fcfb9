"""Domain entities."""

from itemflow.domain.entities.item import Item

__all__ = ["Item"]
