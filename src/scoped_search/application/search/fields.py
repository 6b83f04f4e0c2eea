"""Application search – per-entity allow-lists of traversable field paths."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable


@dataclasses.dataclass(frozen=True)
class EntitySchema:
    """What a search endpoint lets callers filter and sort on.

    ``filterable`` holds dotted relation paths (``team.id``); anything else is
    rejected before it reaches the wire.
    """

    name: str
    resource_base: str
    filterable: frozenset[str]
    sortable: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "filterable", frozenset(self.filterable))
        object.__setattr__(self, "sortable", frozenset(self.sortable))

    def allows_filter(self, path: str) -> bool:
        return path in self.filterable

    def allows_sort(self, field: str) -> bool:
        return field in self.sortable

    @property
    def search_path(self) -> str:
        return f"{self.resource_base.rstrip('/')}/search"


class SchemaRegistry:
    """Startup-built lookup of :class:`EntitySchema` by entity name."""

    def __init__(self, schemas: Iterable[EntitySchema] = ()) -> None:
        self._schemas: dict[str, EntitySchema] = {}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: EntitySchema) -> None:
        if schema.name in self._schemas:
            raise ValueError(f"Entity schema {schema.name!r} is already registered")
        self._schemas[schema.name] = schema

    def get(self, name: str) -> EntitySchema:
        try:
            return self._schemas[name]
        except KeyError:
            raise KeyError(f"Unknown entity {name!r}") from None

    def names(self) -> list[str]:
        return sorted(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


__all__ = ["EntitySchema", "SchemaRegistry"]
