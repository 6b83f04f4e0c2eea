"""HTTP adapter – SearchClient and ResourceClient.

Both return a :data:`~scoped_search.kernel.types.Result` instead of raising
recoverable transport errors; an optional caller-owned *error_sink* receives
the human-readable message of every failure.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Generic, TypeVar

from scoped_search.adapters.http.client import HttpxHttpClient
from scoped_search.application.pagination import PageableResult, Pagination
from scoped_search.application.search.encoder import encode_pagination
from scoped_search.application.search.fields import EntitySchema
from scoped_search.application.search.validator import QueryValidator
from scoped_search.kernel.errors import TransportError, UnknownTransportError, ValidationError
from scoped_search.kernel.query import QueryDTO
from scoped_search.kernel.types import Err, Ok, Result
from scoped_search.observability.logging import get_logger

T = TypeVar("T")
R = TypeVar("R")

ErrorSink = Callable[[str], Any]

_log = get_logger(__name__)


async def _reported(
    call: Callable[[], Awaitable[R]],
    error_sink: ErrorSink | None,
) -> Result[R, TransportError]:
    try:
        return Ok(await call())
    except TransportError as exc:
        if error_sink is not None:
            error_sink(exc.message)
        return Err(exc)


class SearchClient(Generic[T]):
    """``POST {resource}/search`` for one entity.

    The QueryDTO travels as the JSON body (its depth is unbounded); page, size
    and sort travel as query parameters.
    """

    def __init__(
        self,
        http: HttpxHttpClient,
        schema: EntitySchema,
        *,
        validator: QueryValidator | None = None,
        item_factory: Callable[[Any], T] | None = None,
    ) -> None:
        self._http = http
        self._schema = schema
        self._validator = validator or QueryValidator(schema)
        self._item_factory = item_factory

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    def search(
        self,
        query: QueryDTO | None = None,
        pagination: Pagination | None = None,
        *,
        error_sink: ErrorSink | None = None,
    ) -> Awaitable[Result[PageableResult[T], TransportError]]:
        """Validate now, then return the awaitable network call.

        Validation runs before anything is awaited, so a
        :class:`~scoped_search.kernel.errors.ValidationError` reaches the
        caller synchronously and nothing is sent.
        """
        query = query if query is not None else QueryDTO()
        pagination = pagination if pagination is not None else Pagination()
        self._validator.validate(query, pagination)
        return _reported(lambda: self._fetch(query, pagination), error_sink)

    async def _fetch(self, query: QueryDTO, pagination: Pagination) -> PageableResult[T]:
        params = encode_pagination(pagination)
        _log.debug(
            "search.request",
            entity=self._schema.name,
            page=pagination.page,
            size=pagination.size,
            sorts=len(pagination.sort),
        )
        payload = await self._http.post(self._schema.search_path, json=query.to_dict(), params=params)
        try:
            return PageableResult.from_dict(payload, self._item_factory, size=pagination.size)
        except ValidationError as exc:
            raise UnknownTransportError(
                "Malformed search response.",
                url=self._schema.search_path,
                detail={"errors": exc.errors},
                cause=exc,
            ) from exc


class ResourceClient(Generic[T]):
    """Plain CRUD on ``{resource}`` sharing the search transport and credentials."""

    def __init__(
        self,
        http: HttpxHttpClient,
        resource_base: str,
        *,
        item_factory: Callable[[Any], T] | None = None,
    ) -> None:
        self._http = http
        self._base = resource_base.rstrip("/")
        self._item_factory = item_factory

    def _url(self, item_id: Any = None) -> str:
        return self._base if item_id is None else f"{self._base}/{item_id}"

    def _build(self, payload: Any) -> Any:
        if payload is None or self._item_factory is None:
            return payload
        return self._item_factory(payload)

    async def get(self, item_id: Any, *, error_sink: ErrorSink | None = None) -> Result[T, TransportError]:
        async def call() -> Any:
            return self._build(await self._http.get(self._url(item_id)))

        return await _reported(call, error_sink)

    async def create(self, payload: Any, *, error_sink: ErrorSink | None = None) -> Result[T, TransportError]:
        async def call() -> Any:
            return self._build(await self._http.post(self._url(), json=payload))

        return await _reported(call, error_sink)

    async def update(
        self, item_id: Any, payload: Any, *, error_sink: ErrorSink | None = None
    ) -> Result[T, TransportError]:
        async def call() -> Any:
            return self._build(await self._http.put(self._url(item_id), json=payload))

        return await _reported(call, error_sink)

    async def delete(self, item_id: Any, *, error_sink: ErrorSink | None = None) -> Result[None, TransportError]:
        async def call() -> None:
            await self._http.delete(self._url(item_id))

        return await _reported(call, error_sink)


__all__ = ["ErrorSink", "ResourceClient", "SearchClient"]
