"""Predicate base – composable boolean query nodes.

Follows the specification pattern: every node can be combined with ``&`` and
``|`` and evaluated in-process with :meth:`Predicate.is_satisfied_by`.  Remote
search endpoints evaluate the same tree against storage; the in-process
evaluation is the reference semantics used by fakes and tests.
"""

from __future__ import annotations

import abc
import functools
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from scoped_search.kernel.query.operators import LogicalOperator

if TYPE_CHECKING:
    from scoped_search.kernel.query.group import GroupFilter


class Predicate(abc.ABC):
    """Abstract node of a predicate tree (``Filter`` or ``GroupFilter``)."""

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: Mapping[str, Any]) -> bool: ...

    @abc.abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    # Named combinators ------------------------------------------------
    def and_(self, other: "Predicate") -> "GroupFilter":
        return _combine(LogicalOperator.AND, self, other)

    def or_(self, other: "Predicate") -> "GroupFilter":
        return _combine(LogicalOperator.OR, self, other)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "Predicate") -> "GroupFilter":
        return _combine(LogicalOperator.AND, self, other)

    def __or__(self, other: "Predicate") -> "GroupFilter":
        return _combine(LogicalOperator.OR, self, other)


def _combine(op: LogicalOperator, left: Predicate, right: Predicate) -> "GroupFilter":
    from scoped_search.kernel.query.group import GroupFilter

    # ``a & b & c`` extends the left AND group instead of nesting it.
    if isinstance(left, GroupFilter) and left.logical_operator == op:
        return GroupFilter.of(op, *left.children, right)
    return GroupFilter.of(op, left, right)


def resolve_path(candidate: Any, path: str) -> list[Any]:
    """Return every value reachable from *candidate* through a dotted *path*.

    Sequences fan out, so ``users.id`` on a team with three users yields three
    ids.  A missing key resolves to ``None`` so that ``project eq null`` matches
    rows without a project.
    """
    values: list[Any] = [candidate]
    for part in path.split("."):
        step: list[Any] = []
        for value in values:
            if isinstance(value, Mapping):
                step.append(value.get(part))
            elif isinstance(value, (list, tuple)):
                step.extend(item.get(part) if isinstance(item, Mapping) else None for item in value)
            elif value is None:
                step.append(None)
            else:
                step.append(getattr(value, part, None))
        values = step
    flat: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(value)
        else:
            flat.append(value)
    return flat


@functools.lru_cache(maxsize=256)
def like_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a SQL ``LIKE`` pattern (``%`` and ``_`` wildcards, case-insensitive)."""
    parts: list[str] = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


__all__ = ["Predicate", "like_pattern", "resolve_path"]
