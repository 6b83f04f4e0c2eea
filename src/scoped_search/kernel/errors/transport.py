"""Transport errors – non-2xx responses and network failures, by class."""

from __future__ import annotations

from typing import Any

from scoped_search.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a query-model violation."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """A remote call failed. Carries the originating HTTP status (if any)."""

    default_code = "transport_error"
    default_message = "An unexpected error occurred."

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or self.default_message, **kwargs)
        self.status_code = status_code
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        return base


class BadRequestError(TransportError):
    default_code = "bad_request"
    default_message = "Bad request. Please check your input."


class UnauthorizedError(TransportError):
    default_code = "unauthorized"
    default_message = "Unauthorized. Please log in and try again."


class ForbiddenError(TransportError):
    default_code = "forbidden"
    default_message = "Forbidden. You do not have permission to perform this action."


class NotFoundError(TransportError):
    default_code = "not_found"
    default_message = "Resource not found. Please try again later."


class ServerError(TransportError):
    default_code = "server_error"
    default_message = "Server error. Please try again later."


class UnknownTransportError(TransportError):
    default_code = "unknown_transport_error"


__all__ = [
    "BadRequestError",
    "ForbiddenError",
    "InfrastructureError",
    "NotFoundError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnknownTransportError",
]
