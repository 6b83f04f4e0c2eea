"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   └── ValidationError
    ├── ApplicationError         (application.py)
    │   └── ReauthenticationRequired
    └── InfrastructureError      (transport.py)
        └── TransportError
            ├── BadRequestError       400
            ├── UnauthorizedError     401
            ├── ForbiddenError        403
            ├── NotFoundError         404
            ├── ServerError           5xx
            └── UnknownTransportError anything else / network failure
"""

from scoped_search.kernel.errors.application import ApplicationError, ReauthenticationRequired
from scoped_search.kernel.errors.base import BaseError
from scoped_search.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
    ValidationError,
)
from scoped_search.kernel.errors.transport import (
    BadRequestError,
    ForbiddenError,
    InfrastructureError,
    NotFoundError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownTransportError,
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
