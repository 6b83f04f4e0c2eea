"""HTTP adapter – classification of non-2xx responses."""
from __future__ import annotations

from scoped_search.kernel.errors import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownTransportError,
)

NETWORK_ISSUE_MESSAGE = "There was a network issue. Please try again."

_BY_STATUS: dict[int, type[TransportError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
}


def classify_response(status_code: int, detail: str | None = None, *, url: str | None = None) -> TransportError:
    """Map a failed response to one of the six coarse transport classes.

    *detail* is the body's ``message`` (or raw text) and is kept for logs;
    the user-facing ``message`` depends on the status only.
    """
    extra = {"body": detail} if detail else None
    if status_code in _BY_STATUS:
        return _BY_STATUS[status_code](status_code=status_code, url=url, detail=extra)
    if 500 <= status_code < 600:
        message = "Service unavailable. Please try again later." if status_code == 503 else None
        return ServerError(message, status_code=status_code, url=url, detail=extra)
    return UnknownTransportError(
        f"Unexpected error (status: {status_code}).",
        status_code=status_code,
        url=url,
        detail=extra,
    )


__all__ = ["NETWORK_ISSUE_MESSAGE", "classify_response"]
