"""GroupFilter – composite predicate combining children under AND / OR."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any

from scoped_search.kernel.errors import InvariantViolationError
from scoped_search.kernel.query.filter import Filter
from scoped_search.kernel.query.operators import LOGICAL_OPERATOR_VALUES, LogicalOperator
from scoped_search.kernel.query.predicate import Predicate


@dataclasses.dataclass(frozen=True)
class GroupFilter(Predicate):
    """Composite node.  Always has at least one child.

    Leaf children live in ``filters`` and nested groups in ``groups``, which is
    how search endpoints expect the tree on the wire; both are evaluated with
    the same ``logical_operator``.
    """

    logical_operator: LogicalOperator | str
    filters: tuple[Filter, ...] = ()
    groups: tuple["GroupFilter", ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.logical_operator, str) and self.logical_operator in LOGICAL_OPERATOR_VALUES:
            object.__setattr__(self, "logical_operator", LogicalOperator(self.logical_operator))
        object.__setattr__(self, "filters", tuple(self.filters))
        object.__setattr__(self, "groups", tuple(self.groups))
        if not self.filters and not self.groups:
            raise InvariantViolationError(
                "GroupFilter requires at least one filter or group",
                detail={"logical_operator": str(self.logical_operator)},
            )
        for child in self.filters:
            if not isinstance(child, Filter):
                raise InvariantViolationError(f"GroupFilter.filters accepts Filter only, got {type(child).__name__}")
        for child in self.groups:
            if not isinstance(child, GroupFilter):
                raise InvariantViolationError(f"GroupFilter.groups accepts GroupFilter only, got {type(child).__name__}")

    @classmethod
    def of(cls, logical_operator: LogicalOperator | str, *children: Predicate) -> "GroupFilter":
        """Build a group from mixed children, routing each to ``filters`` or ``groups``."""
        return cls(
            logical_operator,
            filters=tuple(c for c in children if isinstance(c, Filter)),
            groups=tuple(c for c in children if isinstance(c, GroupFilter)),
        )

    @property
    def children(self) -> tuple[Predicate, ...]:
        return (*self.filters, *self.groups)

    def is_satisfied_by(self, candidate: Mapping[str, Any]) -> bool:
        results = (child.is_satisfied_by(candidate) for child in self.children)
        if LogicalOperator(self.logical_operator) is LogicalOperator.OR:
            return any(results)
        return all(results)

    def to_dict(self) -> dict[str, Any]:
        op = self.logical_operator
        return {
            "logicalOperator": op.value if isinstance(op, LogicalOperator) else op,
            "filters": [f.to_dict() for f in self.filters],
            "groups": [g.to_dict() for g in self.groups],
        }


def _present(predicates: Iterable[Predicate | None]) -> list[Predicate]:
    return [p for p in predicates if p is not None]


def all_of(*predicates: Predicate | None) -> Predicate | None:
    """AND the non-``None`` predicates; ``None`` if none, the predicate itself if one."""
    present = _present(predicates)
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return GroupFilter.of(LogicalOperator.AND, *present)


def any_of(*predicates: Predicate | None) -> Predicate | None:
    """OR the non-``None`` predicates; ``None`` if none, the predicate itself if one."""
    present = _present(predicates)
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return GroupFilter.of(LogicalOperator.OR, *present)


__all__ = ["GroupFilter", "all_of", "any_of"]
