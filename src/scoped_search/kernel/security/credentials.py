"""Kernel security – CredentialProvider port.

The provider owns the session: it hands out the bearer token attached to every
request and is the target of the re-authentication side effect when the
backend rejects that token.
"""

from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Protocol, runtime_checkable


@runtime_checkable
class CredentialProvider(Protocol):
    async def access_token(self) -> str | None:
        """Return the current bearer token, or ``None`` when no session exists."""
        ...

    async def redirect_to_login(self) -> None:
        """Send the user back through authentication (session rejected)."""
        ...


class AnonymousCredentials:
    """No session: requests go out without an ``Authorization`` header."""

    async def access_token(self) -> str | None:
        return None

    async def redirect_to_login(self) -> None:
        return None


class StaticCredentials:
    """Fixed token with an optional login-redirect callback."""

    def __init__(
        self,
        token: str | None,
        on_redirect: Callable[[], Awaitable[None] | None] | None = None,
    ) -> None:
        self._token = token
        self._on_redirect = on_redirect
        self.redirects = 0

    async def access_token(self) -> str | None:
        return self._token

    async def redirect_to_login(self) -> None:
        self.redirects += 1
        if self._on_redirect is not None:
            result = self._on_redirect()
            if inspect.isawaitable(result):
                await result


__all__ = ["AnonymousCredentials", "CredentialProvider", "StaticCredentials"]
