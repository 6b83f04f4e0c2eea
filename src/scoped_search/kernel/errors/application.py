"""Application-layer errors – cross-cutting concerns at use-case level."""

from __future__ import annotations

from typing import Any

from scoped_search.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ReauthenticationRequired(ApplicationError):
    """The session credential was rejected and a re-login was triggered.

    Fatal for the whole navigation context: it is deliberately not a
    :class:`~scoped_search.kernel.errors.TransportError`, so it escapes
    ``Result``/error-sink handling and unwinds to whoever owns the session.
    """

    default_code = "reauthentication_required"

    def __init__(self, message: str = "Session expired. Please log in again.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["ApplicationError", "ReauthenticationRequired"]
