"""Item request schemas and response visibility.

Pydantic models for request body validation, and the visibility schema that
controls which Item fields reach API consumers. Kept separate from the
domain entity - these are HTTP-layer concerns.

Endpoints:
    GET    /items              - List items
    GET    /items/{item_id}    - Get item
    POST   /items              - Create item (ItemCreateRequest)
    PUT    /items/{item_id}    - Update item (ItemUpdateRequest)
    DELETE /items/{item_id}    - Delete item
"""

from pydantic import BaseModel, ConfigDict, Field

from itemflow.domain.entities import Item
from itemflow.pipeline.serialization import Visibility, VisibilitySchema


# =============================================================================
# Request bodies
# =============================================================================


class ItemCreateRequest(BaseModel):
    """Request body for POST /items.

    Unknown fields (including any attempt to set ``internal_secret``) are
    ignored.
    """

    name: str = Field(..., description="Item name")
    description: str | None = Field(None, description="Optional description")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {"name": "Widget", "description": "A small widget"}
        },
    )


class ItemUpdateRequest(ItemCreateRequest):
    """Request body for PUT /items/{item_id} (full replacement of name/description)."""

    pass


# =============================================================================
# Response visibility
# =============================================================================


ITEM_VISIBILITY = VisibilitySchema(
    kind="item",
    fields={
        "id": Visibility.VISIBLE,
        "name": Visibility.VISIBLE,
        "description": Visibility.VISIBLE,
        "internal_secret": Visibility.HIDDEN,
    },
)

# Record type -> visibility schema, consumed by SerializationFilter.
VISIBILITY_SCHEMAS: dict[type, VisibilitySchema] = {
    Item: ITEM_VISIBILITY,
}
