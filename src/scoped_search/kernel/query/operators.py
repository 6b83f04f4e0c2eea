"""Query operators – comparison and logical operators understood by search endpoints."""
from __future__ import annotations

from enum import Enum


class Operator(str, Enum):
    """Leaf comparison operator (wire value is the lower-case slug)."""

    EQ = "eq"
    NE = "ne"
    LK = "lk"
    IN = "in"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


class LogicalOperator(str, Enum):
    """Combinator of a :class:`~scoped_search.kernel.query.GroupFilter`."""

    AND = "AND"
    OR = "OR"


OPERATOR_VALUES: frozenset[str] = frozenset(op.value for op in Operator)
LOGICAL_OPERATOR_VALUES: frozenset[str] = frozenset(op.value for op in LogicalOperator)

#: Operators whose value must be an ordered, non-null scalar.
RANGE_OPERATORS: frozenset[Operator] = frozenset({Operator.GT, Operator.GTE, Operator.LT, Operator.LTE})

__all__ = [
    "LOGICAL_OPERATOR_VALUES",
    "LogicalOperator",
    "OPERATOR_VALUES",
    "Operator",
    "RANGE_OPERATORS",
]
