"""Kernel query – immutable predicate tree (Filter, GroupFilter, QueryDTO)."""
from scoped_search.kernel.query.filter import Filter
from scoped_search.kernel.query.group import GroupFilter, all_of, any_of
from scoped_search.kernel.query.operators import LogicalOperator, Operator
from scoped_search.kernel.query.predicate import Predicate, resolve_path
from scoped_search.kernel.query.query import QueryDTO

__all__ = [
    "Filter",
    "GroupFilter",
    "LogicalOperator",
    "Operator",
    "Predicate",
    "QueryDTO",
    "all_of",
    "any_of",
    "resolve_path",
]
