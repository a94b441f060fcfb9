"""Item domain entity.

Pure value object, no framework dependencies. Items are immutable: an update
produces a new Item under the same id rather than mutating the stored one.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Item:
    """A stored item.

    Business Rules:
        - id is assigned by the store and never reused
        - internal_secret is generated once at creation and copied forward
          by every update; callers never supply it
        - internal_secret is hidden from every response (see the item
          visibility schema)

    Attributes:
        id: Positive integer identifier.
        name: Display name (required).
        description: Optional description.
        internal_secret: Store-generated value, never exposed.

    Example:
        >>> item = Item(id=1, name="Widget", internal_secret="secret-1")
        >>> item.description is None
        True
    """

    id: int
    name: str
    description: str | None = None
    internal_secret: str

    def with_changes(self, *, name: str, description: str | None) -> "Item":
        """Return a replacement item with the same id and secret."""
        return Item(
            id=self.id,
            name=name,
            description=description,
            internal_secret=self.internal_secret,
        )
