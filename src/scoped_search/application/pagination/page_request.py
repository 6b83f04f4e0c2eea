"""Application pagination – Pagination, Sort, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single sort criterion.  Unknown direction strings are kept for the validator."""
    field: str
    direction: SortDirection | str = SortDirection.ASC

    def __post_init__(self) -> None:
        if isinstance(self.direction, str) and self.direction.lower() in ("asc", "desc"):
            object.__setattr__(self, "direction", SortDirection(self.direction.lower()))

    @classmethod
    def asc(cls, field: str) -> "Sort":
        return cls(field, SortDirection.ASC)

    @classmethod
    def desc(cls, field: str) -> "Sort":
        return cls(field, SortDirection.DESC)


@dataclasses.dataclass(frozen=True)
class Pagination:
    """1-based page request with an ordered multi-key sort.

    The first ``sort`` entry is the primary key, later entries only break ties.
    Range checks live in :class:`~scoped_search.application.search.QueryValidator`
    so that every violation is reported at once.
    """
    page: int = 1
    size: int = 10
    sort: tuple[Sort, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sort", tuple(self.sort))

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    def with_page(self, page: int) -> "Pagination":
        return dataclasses.replace(self, page=page)


__all__ = ["Pagination", "Sort", "SortDirection"]
