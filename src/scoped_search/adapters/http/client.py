"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

import json
from typing import Any

import httpx

from scoped_search.adapters.http.errors import NETWORK_ISSUE_MESSAGE, classify_response
from scoped_search.config import SearchSettings
from scoped_search.kernel.errors import (
    ReauthenticationRequired,
    UnauthorizedError,
    UnknownTransportError,
)
from scoped_search.kernel.security import AnonymousCredentials, CredentialProvider
from scoped_search.observability.logging import get_logger

_log = get_logger(__name__)


class HttpxHttpClient:
    """Thin async httpx wrapper: JSON in/out, bearer credentials, error classification.

    No request is ever retried here; retry policy belongs to the caller.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float | None = 10.0,
        credentials: CredentialProvider | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)
        self._credentials = credentials or AnonymousCredentials()

    @classmethod
    def from_settings(
        cls,
        settings: SearchSettings,
        credentials: CredentialProvider | None = None,
        **kwargs: Any,
    ) -> "HttpxHttpClient":
        return cls(settings.base_url, settings.timeout, credentials, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> Any:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> Any:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> Any:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> Any:
        return await self.request("DELETE", url, **kwargs)

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        params: Any = None,
        authenticated: bool = True,
    ) -> Any:
        """Send one request and return the decoded JSON body (``None`` if not JSON).

        Raises
        ------
        TransportError
            Classified failure (non-2xx or network).
        ReauthenticationRequired
            401 while a bearer token was attached; the credential provider's
            login redirect has already been triggered.
        """
        headers = {"Accept": "application/json"}
        token = await self._credentials.access_token() if authenticated else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        content: bytes | None = None
        if json is not None:
            headers["Content-Type"] = "application/json"
            content = _dumps(json)

        try:
            response = await self._client.request(method, url, params=params, headers=headers, content=content)
        except httpx.HTTPError as exc:
            _log.warning("http.network_error", method=method, url=url, error=repr(exc))
            raise UnknownTransportError(NETWORK_ISSUE_MESSAGE, url=url, cause=exc) from exc

        if response.is_success:
            return _decode(response, url)

        error = classify_response(response.status_code, _error_detail(response), url=url)
        _log.warning(
            "http.error",
            method=method,
            url=url,
            status=response.status_code,
            error_class=type(error).__name__,
            detail=error.detail.get("body"),
        )
        if isinstance(error, UnauthorizedError) and token:
            await self._credentials.redirect_to_login()
            raise ReauthenticationRequired(cause=error)
        raise error


def _dumps(body: Any) -> bytes:
    return json.dumps(body, ensure_ascii=False).encode("utf-8")


def _decode(response: httpx.Response, url: str) -> Any:
    if "application/json" not in response.headers.get("content-type", ""):
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise UnknownTransportError("Malformed response body.", status_code=response.status_code, url=url, cause=exc) from exc


def _error_detail(response: httpx.Response) -> str | None:
    if "application/json" in response.headers.get("content-type", ""):
        try:
            body = response.json()
        except ValueError:
            return response.text or None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return json.dumps(body)
    return response.text or None


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
