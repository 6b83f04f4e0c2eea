"""Kernel security – session credentials and sensitive-field defaults."""
from scoped_search.kernel.security.credentials import (
    AnonymousCredentials,
    CredentialProvider,
    StaticCredentials,
)
from scoped_search.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = [
    "AnonymousCredentials",
    "CredentialProvider",
    "DEFAULT_SENSITIVE_FIELDS",
    "StaticCredentials",
]
