"""Kernel security – default sensitive fields redacted from log records."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "access_token", "api_key", "apikey",
    "authorization", "cookie", "set-cookie",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
