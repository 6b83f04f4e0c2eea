"""Filter – leaf predicate ``(field, operator, value)``."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from scoped_search.kernel.query.operators import OPERATOR_VALUES, Operator
from scoped_search.kernel.query.predicate import Predicate, like_pattern, resolve_path


@dataclasses.dataclass(frozen=True)
class Filter(Predicate):
    """Leaf predicate over a dotted relation path (``team.id``, ``requestUser.id``).

    List values are frozen into tuples so the node stays hashable.  An unknown
    operator string is kept verbatim; the validator reports it.
    """

    field: str
    operator: Operator | str
    value: Any = None

    def __post_init__(self) -> None:
        if isinstance(self.operator, str) and self.operator in OPERATOR_VALUES:
            object.__setattr__(self, "operator", Operator(self.operator))
        if isinstance(self.value, list):
            object.__setattr__(self, "value", tuple(self.value))

    # Convenience constructors -----------------------------------------
    @classmethod
    def eq(cls, field: str, value: Any) -> "Filter":
        return cls(field, Operator.EQ, value)

    @classmethod
    def ne(cls, field: str, value: Any) -> "Filter":
        return cls(field, Operator.NE, value)

    @classmethod
    def like(cls, field: str, pattern: str) -> "Filter":
        return cls(field, Operator.LK, pattern)

    @classmethod
    def contains(cls, field: str, text: str) -> "Filter":
        """``lk`` with the ``%text%`` wrapping used by free-text search boxes."""
        return cls(field, Operator.LK, f"%{text}%")

    @classmethod
    def in_(cls, field: str, values: Any) -> "Filter":
        return cls(field, Operator.IN, tuple(values))

    @classmethod
    def gt(cls, field: str, value: Any) -> "Filter":
        return cls(field, Operator.GT, value)

    @classmethod
    def lt(cls, field: str, value: Any) -> "Filter":
        return cls(field, Operator.LT, value)

    def is_satisfied_by(self, candidate: Mapping[str, Any]) -> bool:
        op = Operator(self.operator)
        return any(self._matches(op, actual) for actual in resolve_path(candidate, self.field))

    def _matches(self, op: Operator, actual: Any) -> bool:  # noqa: PLR0911
        expected = self.value
        match op:
            case Operator.EQ:
                return actual == expected
            case Operator.NE:
                return actual != expected
            case Operator.LK:
                return actual is not None and like_pattern(str(expected)).fullmatch(str(actual)) is not None
            case Operator.IN:
                return isinstance(expected, (tuple, list, frozenset, set)) and actual in expected
        if actual is None or expected is None:
            return False
        try:
            match op:
                case Operator.GT:
                    return actual > expected
                case Operator.GTE:
                    return actual >= expected
                case Operator.LT:
                    return actual < expected
                case Operator.LTE:
                    return actual <= expected
        except TypeError:
            # Values of unrelated types never compare as ordered.
            return False
        return False

    def to_dict(self) -> dict[str, Any]:
        op = self.operator.value if isinstance(self.operator, Operator) else self.operator
        value = list(self.value) if isinstance(self.value, tuple) else self.value
        return {"field": self.field, "operator": op, "value": value}


__all__ = ["Filter"]
