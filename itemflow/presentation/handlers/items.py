"""Item CRUD handlers.

Handlers receive already-bound arguments and know nothing about the stages
around them. They return domain values; projection and status mapping
happen elsewhere. "Not found" is returned as None (or False for delete).
"""

from itemflow.domain.entities import Item
from itemflow.domain.protocols import ItemRepository
from itemflow.schemas.item_schemas import ItemCreateRequest, ItemUpdateRequest


class ItemsController:
    """CRUD operations over an item store.

    Args:
        store: The item store all mutations go through.
    """

    def __init__(self, store: ItemRepository) -> None:
        self._store = store

    def list_items(self) -> list[Item]:
        return self._store.list()

    def get_item(self, item_id: int) -> Item | None:
        return self._store.get(item_id)

    def create_item(self, body: ItemCreateRequest) -> Item:
        return self._store.create(body.name, body.description)

    def update_item(self, item_id: int, body: ItemUpdateRequest) -> Item | None:
        return self._store.update(item_id, body.name, body.description)

    def delete_item(self, item_id: int) -> dict[str, bool]:
        """Delete an item.

        Returns:
            dict[str, bool]: ``{"deleted": True}`` when removed,
                ``{"deleted": False}`` when the id was unknown.
        """
        return {"deleted": self._store.remove(item_id)}
