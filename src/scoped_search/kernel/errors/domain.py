"""Domain errors – malformed predicates and failed structural checks."""

from __future__ import annotations

from typing import Any

from scoped_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query-model rule is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A value object was constructed in a state it must never be in."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """A query or pagination failed structural validation.

    ``errors`` is the list of violations, each ``{"loc": ..., "msg": ...}``.
    Raised locally before any network call; never retried, never transmitted.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = [
    "DomainError",
    "InvariantViolationError",
    "ValidationError",
]
