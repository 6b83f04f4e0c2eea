"""
scoped_search – composable query specifications and paginated search client.

Import path convention::

    from scoped_search.kernel.query import Filter, GroupFilter, QueryDTO
    from scoped_search.application.pagination import Pagination, PageableResult
    from scoped_search.application.search import ScopedQueryBuilder, QueryValidator
    from scoped_search.adapters.http import HttpxHttpClient, SearchClient
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
