"""Observability – structured logging helpers."""
from scoped_search.observability.logging.factory import JsonLoggerFactory
from scoped_search.observability.logging.filters import SensitiveFieldsFilter
from scoped_search.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
