"""Application pagination – Pagination, Sort and the PageableResult envelope."""
from scoped_search.application.pagination.page import PageableResult
from scoped_search.application.pagination.page_request import Pagination, Sort, SortDirection

__all__ = ["PageableResult", "Pagination", "Sort", "SortDirection"]
