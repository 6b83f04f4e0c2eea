"""Kernel types – Result monad used by the transport layer."""
from scoped_search.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
