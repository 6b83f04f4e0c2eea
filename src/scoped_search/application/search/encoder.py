"""Application search – Pagination to transport query parameters."""
from __future__ import annotations

from scoped_search.application.pagination import Pagination, SortDirection


def encode_pagination(pagination: Pagination) -> list[tuple[str, str]]:
    """Return ``page``/``size``/``sort`` parameters in wire order.

    The wire page is 0-based; this is the only place the ``page - 1``
    translation happens.  One ``sort=field,direction`` pair is emitted per
    entry, in declaration order.
    """
    params: list[tuple[str, str]] = [
        ("page", str(pagination.page - 1)),
        ("size", str(pagination.size)),
    ]
    for entry in pagination.sort:
        direction = entry.direction.value if isinstance(entry.direction, SortDirection) else str(entry.direction)
        params.append(("sort", f"{entry.field},{direction}"))
    return params


__all__ = ["encode_pagination"]
