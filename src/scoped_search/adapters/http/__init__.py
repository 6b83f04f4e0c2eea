"""HTTP adapter – httpx transport, search and resource clients."""
from scoped_search.adapters.http.client import HttpClient, HttpxHttpClient
from scoped_search.adapters.http.errors import NETWORK_ISSUE_MESSAGE, classify_response
from scoped_search.adapters.http.search_client import ErrorSink, ResourceClient, SearchClient

__all__ = [
    "ErrorSink",
    "HttpClient",
    "HttpxHttpClient",
    "NETWORK_ISSUE_MESSAGE",
    "ResourceClient",
    "SearchClient",
    "classify_response",
]
