"""Application search – scoped query composition, validation and view state."""
from scoped_search.application.search.builder import ScopedQueryBuilder, compose_scoped_query, is_scoped_by
from scoped_search.application.search.encoder import encode_pagination
from scoped_search.application.search.facets import (
    PRIORITY_CODES,
    TICKET_STATUS_FACET,
    Facet,
    TicketSearchForm,
    TicketStatus,
    text_search,
)
from scoped_search.application.search.fields import EntitySchema, SchemaRegistry
from scoped_search.application.search.generation import Debouncer, GenerationGuard, LatestOnly
from scoped_search.application.search.reconciliation import ResultView
from scoped_search.application.search.resources import default_registry
from scoped_search.application.search.validator import QueryValidator
from scoped_search.application.search.view import SearchPort, SearchViewModel

__all__ = [
    "Debouncer",
    "EntitySchema",
    "Facet",
    "GenerationGuard",
    "LatestOnly",
    "PRIORITY_CODES",
    "QueryValidator",
    "ResultView",
    "SchemaRegistry",
    "ScopedQueryBuilder",
    "SearchPort",
    "SearchViewModel",
    "TICKET_STATUS_FACET",
    "TicketSearchForm",
    "TicketStatus",
    "compose_scoped_query",
    "default_registry",
    "encode_pagination",
    "is_scoped_by",
    "text_search",
]
