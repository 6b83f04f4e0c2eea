"""Application pagination – PageableResult envelope."""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from typing import Any, Callable, Generic, TypeVar

from scoped_search.application.pagination.page_request import Pagination
from scoped_search.kernel.errors import ValidationError

T = TypeVar("T")
U = TypeVar("U")


@dataclasses.dataclass(frozen=True)
class PageableResult(Generic[T]):
    """One page of a search: ``content`` plus the totals of the whole result set."""

    content: tuple[T, ...]
    total_elements: int
    total_pages: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))

    @classmethod
    def empty(cls) -> "PageableResult[T]":
        return cls(content=(), total_elements=0, total_pages=0)

    @classmethod
    def of(cls, all_items: list[T], pagination: Pagination) -> "PageableResult[T]":
        """Slice *all_items* with *pagination* and compute the totals."""
        total = len(all_items)
        start = pagination.offset
        return cls(
            content=tuple(all_items[start:start + pagination.size]),
            total_elements=total,
            total_pages=math.ceil(total / pagination.size) if pagination.size > 0 else 0,
        )

    @classmethod
    def from_dict(
        cls,
        payload: Mapping[str, Any],
        item_factory: Callable[[Any], T] | None = None,
        *,
        size: int | None = None,
    ) -> "PageableResult[T]":
        """Parse the ``{content, totalElements, totalPages}`` wire envelope.

        With *size* (the requested page size) the envelope must also hold
        ``len(content) <= size`` and ``totalPages == ceil(totalElements / size)``.
        """
        errors: list[dict[str, Any]] = []
        if not isinstance(payload, Mapping):
            raise ValidationError("Invalid page payload", errors=[{"loc": "", "msg": "expected an object"}])
        content = payload.get("content")
        if not isinstance(content, list):
            errors.append({"loc": "content", "msg": "expected a list"})
        for key in ("totalElements", "totalPages"):
            value = payload.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                errors.append({"loc": key, "msg": "expected a non-negative integer"})
        if not errors and size is not None and size > 0:
            if len(content) > size:
                errors.append({"loc": "content", "msg": f"more than {size} items for page size {size}"})
            if payload["totalPages"] != math.ceil(payload["totalElements"] / size):
                errors.append({"loc": "totalPages", "msg": f"inconsistent with totalElements for page size {size}"})
        if errors:
            raise ValidationError("Invalid page payload", errors=errors)
        factory = item_factory or (lambda item: item)
        return cls(
            content=tuple(factory(item) for item in content),
            total_elements=payload["totalElements"],
            total_pages=payload["totalPages"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "content": list(self.content),
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
        }

    def map(self, fn: Callable[[T], U]) -> "PageableResult[U]":
        """Return a new page with each item transformed by *fn*; totals unchanged."""
        return PageableResult(
            content=tuple(fn(item) for item in self.content),
            total_elements=self.total_elements,
            total_pages=self.total_pages,
        )

    def has_next(self, page: int) -> bool:
        return page < self.total_pages

    def __len__(self) -> int:
        return len(self.content)


__all__ = ["PageableResult"]
