"""Application search – ResultView: how a view's result set is replaced or patched."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Generic, TypeVar

from scoped_search.application.pagination import PageableResult

T = TypeVar("T")


def _identity(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


class ResultView(Generic[T]):
    """Last-known-good page of a search-driven view.

    A successful fetch replaces ``content`` and both totals; single-item
    patches touch one entry by identity and leave the totals alone until the
    next full fetch.
    """

    def __init__(self, key: Callable[[T], Any] = _identity) -> None:
        self._key = key
        self.content: list[T] = []
        self.total_elements = 0
        self.total_pages = 0
        self.error: str | None = None

    def replace(self, result: PageableResult[T]) -> None:
        self.content = list(result.content)
        self.total_elements = result.total_elements
        self.total_pages = result.total_pages
        self.error = None

    def clear(self) -> None:
        self.replace(PageableResult.empty())

    def fail(self, message: str) -> None:
        """Record an error; the previously fetched page stays visible."""
        self.error = message

    def patch(self, item_id: Any, update: Callable[[T], T]) -> bool:
        """Apply *update* to the item whose identity is *item_id*.

        Returns ``False`` when the item is not on the current page.
        """
        for index, item in enumerate(self.content):
            if self._key(item) == item_id:
                self.content[index] = update(item)
                return True
        return False

    def snapshot(self) -> PageableResult[T]:
        return PageableResult(
            content=tuple(self.content),
            total_elements=self.total_elements,
            total_pages=self.total_pages,
        )


__all__ = ["ResultView"]
