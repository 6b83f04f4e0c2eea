"""Kernel – framework-agnostic building blocks (errors, results, predicates)."""

from scoped_search.kernel.errors import (
    ApplicationError,
    BadRequestError,
    BaseError,
    DomainError,
    ForbiddenError,
    InfrastructureError,
    InvariantViolationError,
    NotFoundError,
    ReauthenticationRequired,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownTransportError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BadRequestError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "InvariantViolationError",
    "NotFoundError",
    "ReauthenticationRequired",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnknownTransportError",
    "ValidationError",
]
