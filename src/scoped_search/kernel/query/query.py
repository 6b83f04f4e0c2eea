"""QueryDTO – root predicate document sent to ``POST {resource}/search``."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from scoped_search.kernel.errors import InvariantViolationError, ValidationError
from scoped_search.kernel.query.filter import Filter
from scoped_search.kernel.query.group import GroupFilter
from scoped_search.kernel.query.operators import LogicalOperator
from scoped_search.kernel.query.predicate import Predicate


@dataclasses.dataclass(frozen=True)
class QueryDTO:
    """Root of a search.  ``filters`` and ``groups`` are AND-combined.

    An empty query matches every row the endpoint exposes.
    """

    filters: tuple[Filter, ...] = ()
    groups: tuple[GroupFilter, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "filters", tuple(self.filters))
        object.__setattr__(self, "groups", tuple(self.groups))

    @classmethod
    def of(cls, *predicates: Predicate | None) -> "QueryDTO":
        """Root query AND-combining *predicates* (``None`` entries are skipped)."""
        present = [p for p in predicates if p is not None]
        return cls(
            filters=tuple(p for p in present if isinstance(p, Filter)),
            groups=tuple(p for p in present if isinstance(p, GroupFilter)),
        )

    @property
    def is_empty(self) -> bool:
        return not self.filters and not self.groups

    @property
    def predicate(self) -> Predicate | None:
        """The root as a single predicate node, or ``None`` for an empty query."""
        if self.is_empty:
            return None
        if len(self.filters) + len(self.groups) == 1:
            return (*self.filters, *self.groups)[0]
        return GroupFilter(LogicalOperator.AND, self.filters, self.groups)

    def is_satisfied_by(self, candidate: Mapping[str, Any]) -> bool:
        return all(p.is_satisfied_by(candidate) for p in (*self.filters, *self.groups))

    def to_dict(self) -> dict[str, Any]:
        return {
            "filters": [f.to_dict() for f in self.filters],
            "groups": [g.to_dict() for g in self.groups],
        }

    @classmethod
    def from_dict(cls, document: Mapping[str, Any]) -> "QueryDTO":
        """Parse a wire document.

        Raises
        ------
        ValidationError
            With one violation per malformed node when the document does not
            have the QueryDTO shape.
        """
        errors: list[dict[str, Any]] = []
        if not isinstance(document, Mapping):
            raise ValidationError("Invalid query document", errors=[{"loc": "", "msg": "expected an object"}])
        filters = _parse_filters(document.get("filters"), "filters", errors)
        groups = _parse_groups(document.get("groups"), "groups", errors)
        if errors:
            raise ValidationError("Invalid query document", errors=errors)
        return cls(filters=filters, groups=groups)


def _parse_filters(raw: Any, loc: str, errors: list[dict[str, Any]]) -> tuple[Filter, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        errors.append({"loc": loc, "msg": "expected a list"})
        return ()
    parsed: list[Filter] = []
    for index, item in enumerate(raw):
        item_loc = f"{loc}[{index}]"
        if not isinstance(item, Mapping):
            errors.append({"loc": item_loc, "msg": "expected an object"})
            continue
        missing = [key for key in ("field", "operator") if key not in item]
        if missing:
            errors.extend({"loc": f"{item_loc}.{key}", "msg": "field required"} for key in missing)
            continue
        wrong = [key for key in ("field", "operator") if not isinstance(item[key], str)]
        if wrong:
            errors.extend({"loc": f"{item_loc}.{key}", "msg": "expected a string"} for key in wrong)
            continue
        parsed.append(Filter(item["field"], item["operator"], item.get("value")))
    return tuple(parsed)


def _parse_groups(raw: Any, loc: str, errors: list[dict[str, Any]]) -> tuple[GroupFilter, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        errors.append({"loc": loc, "msg": "expected a list"})
        return ()
    parsed: list[GroupFilter] = []
    for index, item in enumerate(raw):
        item_loc = f"{loc}[{index}]"
        if not isinstance(item, Mapping):
            errors.append({"loc": item_loc, "msg": "expected an object"})
            continue
        if "logicalOperator" not in item:
            errors.append({"loc": f"{item_loc}.logicalOperator", "msg": "field required"})
            continue
        if not isinstance(item["logicalOperator"], str):
            errors.append({"loc": f"{item_loc}.logicalOperator", "msg": "expected a string"})
            continue
        before = len(errors)
        filters = _parse_filters(item.get("filters"), f"{item_loc}.filters", errors)
        groups = _parse_groups(item.get("groups"), f"{item_loc}.groups", errors)
        if len(errors) > before:
            continue
        try:
            parsed.append(GroupFilter(item["logicalOperator"], filters, groups))
        except InvariantViolationError as exc:
            errors.append({"loc": item_loc, "msg": exc.message})
    return tuple(parsed)


__all__ = ["QueryDTO"]
