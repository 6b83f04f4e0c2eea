"""Testing fakes – in-memory search backend."""
from scoped_search.testing.fakes.search_backend import InMemorySearchBackend

__all__ = ["InMemorySearchBackend"]
