"""Testing fakes – InMemorySearchBackend.

Serves the search wire contract from rows held in memory so clients can be
exercised end-to-end through ``httpx.MockTransport``::

    backend = InMemorySearchBackend(token="t0k3n")
    backend.add("/api/team-requests", {"id": 1, "team": {"id": 42}, ...})
    http = HttpxHttpClient("http://portal", transport=backend.transport(), credentials=...)
"""
from __future__ import annotations

import json
import math
from typing import Any

import httpx

from scoped_search.kernel.errors import ValidationError
from scoped_search.kernel.query import QueryDTO, resolve_path


class InMemorySearchBackend:
    """Fake portal backend: evaluates QueryDTO trees, pages and sorts rows."""

    def __init__(self, token: str | None = None) -> None:
        self._rows: dict[str, list[dict[str, Any]]] = {}
        self._token = token
        self.requests: list[httpx.Request] = []

    def add(self, resource_base: str, *rows: dict[str, Any]) -> None:
        self._rows.setdefault(resource_base.rstrip("/"), []).extend(rows)

    def rows(self, resource_base: str) -> list[dict[str, Any]]:
        return self._rows.get(resource_base.rstrip("/"), [])

    # ------------------------------------------------------------------
    # Search semantics
    # ------------------------------------------------------------------

    def search(
        self,
        resource_base: str,
        query: QueryDTO,
        page: int,
        size: int,
        sort: list[tuple[str, str]] | None = None,
    ) -> dict[str, Any]:
        """Return the wire envelope for a 0-based *page*."""
        matched = [row for row in self.rows(resource_base) if query.is_satisfied_by(row)]
        # Stable sorts applied from the last key to the first keep earlier
        # entries primary and later ones as tie-breakers.
        for field, direction in reversed(sort or []):
            matched.sort(key=lambda row: _sort_key(row, field), reverse=direction == "desc")
        total = len(matched)
        start = page * size
        return {
            "content": matched[start:start + size],
            "totalElements": total,
            "totalPages": math.ceil(total / size) if size > 0 else 0,
        }

    # ------------------------------------------------------------------
    # httpx transport
    # ------------------------------------------------------------------

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._token is not None and request.headers.get("authorization") != f"Bearer {self._token}":
            return httpx.Response(401, json={"message": "Full authentication is required"})

        path = request.url.path.rstrip("/")
        if request.method == "POST" and path.endswith("/search"):
            return self._handle_search(path.removesuffix("/search"), request)

        base, _, item_id = path.rpartition("/")
        if request.method == "GET" and base in self._rows:
            for row in self._rows[base]:
                if str(row.get("id")) == item_id:
                    return httpx.Response(200, json=row)
        if request.method == "POST" and path in self._rows:
            row = dict(json.loads(request.content))
            row.setdefault("id", max((r.get("id", 0) for r in self._rows[path]), default=0) + 1)
            self._rows[path].append(row)
            return httpx.Response(201, json=row)
        if request.method == "PUT" and base in self._rows:
            for index, row in enumerate(self._rows[base]):
                if str(row.get("id")) == item_id:
                    self._rows[base][index] = {**row, **json.loads(request.content)}
                    return httpx.Response(200, json=self._rows[base][index])
        if request.method == "DELETE" and base in self._rows:
            before = len(self._rows[base])
            self._rows[base] = [r for r in self._rows[base] if str(r.get("id")) != item_id]
            if len(self._rows[base]) < before:
                return httpx.Response(204)
        return httpx.Response(404, text=f"No resource at {request.url.path}")

    def _handle_search(self, base: str, request: httpx.Request) -> httpx.Response:
        params = request.url.params
        try:
            query = QueryDTO.from_dict(json.loads(request.content or b"{}"))
            page = int(params.get("page", "0"))
            size = int(params.get("size", "10"))
        except (ValidationError, ValueError) as exc:
            return httpx.Response(400, json={"message": str(exc)})
        sort = [tuple(entry.rsplit(",", 1)) for entry in params.get_list("sort")]
        return httpx.Response(200, json=self.search(base, query, page, size, sort))


def _sort_key(row: dict[str, Any], field: str) -> tuple[bool, Any]:
    values = resolve_path(row, field)
    value = values[0] if values else None
    return (value is not None, value if value is not None else 0)


__all__ = ["InMemorySearchBackend"]
