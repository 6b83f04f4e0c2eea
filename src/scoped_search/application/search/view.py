"""Application search – SearchViewModel: one search-driven view's refresh cycle."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Generic, Protocol, TypeVar

from scoped_search.application.pagination import PageableResult, Pagination
from scoped_search.application.search.generation import GenerationGuard
from scoped_search.application.search.reconciliation import ResultView
from scoped_search.kernel.errors import TransportError
from scoped_search.kernel.query import QueryDTO
from scoped_search.kernel.types import Ok, Result

T = TypeVar("T")


class SearchPort(Protocol[T]):
    def search(
        self,
        query: QueryDTO | None = None,
        pagination: Pagination | None = None,
        *,
        error_sink: Callable[[str], Any] | None = None,
    ) -> Awaitable[Result[PageableResult[T], TransportError]]: ...


class SearchViewModel(Generic[T]):
    """Owns a :class:`ResultView` and applies only the newest search outcome.

    Successful pages replace the view; failures are handed to *error_sink*
    (when given) and recorded on the view, which keeps its last-known-good
    content.  A response older than one already applied is dropped.
    """

    def __init__(
        self,
        port: SearchPort[T],
        *,
        view: ResultView[T] | None = None,
        error_sink: Callable[[str], Any] | None = None,
    ) -> None:
        self._port = port
        self._guard = GenerationGuard()
        self._error_sink = error_sink
        self.view: ResultView[T] = view or ResultView()

    @property
    def guard(self) -> GenerationGuard:
        return self._guard

    async def refresh(self, query: QueryDTO, pagination: Pagination) -> bool:
        """Run one search.  Returns ``True`` when its outcome was applied."""
        generation = self._guard.next()
        outcome = await self._port.search(query, pagination)
        return self._guard.apply(generation, lambda: self._apply(outcome))

    def _apply(self, outcome: Result[PageableResult[T], TransportError]) -> None:
        if isinstance(outcome, Ok):
            self.view.replace(outcome.value)
            return
        message = outcome.error.message
        self.view.fail(message)
        if self._error_sink is not None:
            self._error_sink(message)


__all__ = ["SearchPort", "SearchViewModel"]
