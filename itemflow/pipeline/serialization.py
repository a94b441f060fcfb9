"""Serialization filter (response projection).

Projects internal records to their externally visible form using a static
visibility schema per record type. The filter is handler-independent: the
orchestrator applies it to every successful result, and any value of a
registered type is projected no matter which route produced it.

Projection rules:
    - Output contains exactly the fields marked VISIBLE, values unchanged
    - HIDDEN fields and fields the schema does not name are omitted
    - Lists and tuples are projected element-wise (into a new list)
    - Dicts are walked value-wise (into a new dict), so wrapped records are
      projected too
    - Values of unregistered types (None, bools, strings) pass through
    - Input is never mutated

Usage:
    serialization = SerializationFilter({Item: ITEM_VISIBILITY})
    serialization.apply(store.list())
    # [{"id": 1, "name": "Widget", "description": None}]
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Visibility(str, Enum):
    """Whether a field appears in responses."""

    VISIBLE = "visible"
    HIDDEN = "hidden"


@dataclass(frozen=True, kw_only=True)
class VisibilitySchema:
    """Field visibility for one resource kind.

    Attributes:
        kind: Resource kind name (e.g., "item").
        fields: Field name -> visibility.

    Example:
        >>> schema = VisibilitySchema(
        ...     kind="item",
        ...     fields={"id": Visibility.VISIBLE, "secret": Visibility.HIDDEN},
        ... )
        >>> schema.visible_fields
        ('id',)
    """

    kind: str
    fields: Mapping[str, Visibility]

    @property
    def visible_fields(self) -> tuple[str, ...]:
        return tuple(
            name
            for name, visibility in self.fields.items()
            if visibility is Visibility.VISIBLE
        )

    def project(self, record: Any) -> dict[str, Any]:
        """Return a new dict holding only the visible fields of ``record``.

        Args:
            record: Object exposing the schema's fields as attributes.

        Returns:
            dict[str, Any]: Visible field names mapped to their values.
        """
        return {name: getattr(record, name) for name in self.visible_fields}


class SerializationFilter:
    """Apply registered visibility schemas to handler results.

    Args:
        schemas: Record type -> visibility schema. Subclasses of a registered
            type use the closest registered ancestor's schema.
    """

    def __init__(self, schemas: Mapping[type, VisibilitySchema]) -> None:
        self._schemas = dict(schemas)

    def schema_for(self, kind: type) -> VisibilitySchema | None:
        for cls in kind.__mro__:
            schema = self._schemas.get(cls)
            if schema is not None:
                return schema
        return None

    def apply(self, result: Any) -> Any:
        """Project ``result`` (or each element of it) when its type is registered."""
        if isinstance(result, (list, tuple)):
            return [self.apply(element) for element in result]
        if isinstance(result, dict):
            return {key: self.apply(value) for key, value in result.items()}
        schema = self.schema_for(type(result))
        if schema is None:
            return result
        return schema.project(result)
