"""Application search – scoped query composition.

A feature's scope filters (``team.id eq 42``) come from route or session
context, never from user input.  The composed query always evaluates as
``scope AND user``: the scope filters sit in one AND group and the user
predicate is nested below them as a child group, so an OR typed by the user can
only ever widen results *inside* the scope.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from scoped_search.kernel.errors import InvariantViolationError
from scoped_search.kernel.query import (
    Filter,
    GroupFilter,
    LogicalOperator,
    Predicate,
    QueryDTO,
    all_of,
    any_of,
)


def compose_scoped_query(
    scope: Iterable[Predicate],
    user: Predicate | QueryDTO | None = None,
) -> QueryDTO:
    """Return a QueryDTO equivalent to ``AND(*scope, user)``.

    Without scope the user query is returned unchanged; without a user
    predicate the scope-only group is sent, which searches every row in scope.
    """
    scope = tuple(scope)
    user_predicate = user.predicate if isinstance(user, QueryDTO) else user

    if not scope:
        if isinstance(user, QueryDTO):
            return user
        return QueryDTO.of(user_predicate)

    if user_predicate is None:
        return QueryDTO(groups=(GroupFilter.of(LogicalOperator.AND, *scope),))

    if isinstance(user_predicate, Filter):
        user_group = GroupFilter(LogicalOperator.AND, filters=(user_predicate,))
    else:
        user_group = user_predicate
    return QueryDTO(groups=(GroupFilter.of(LogicalOperator.AND, *scope, user_group),))


def is_scoped_by(query: QueryDTO, scope: Predicate) -> bool:
    """True when *scope* is reachable from the root through AND nodes only."""
    if scope in query.filters or scope in query.groups:
        return True
    return any(_and_path_contains(group, scope) for group in query.groups)


def _and_path_contains(group: GroupFilter, scope: Predicate) -> bool:
    if group.logical_operator is not LogicalOperator.AND:
        return False
    if scope in group.filters or scope in group.groups:
        return True
    return any(_and_path_contains(child, scope) for child in group.groups)


class ScopedQueryBuilder:
    """Fluent front-end for :func:`compose_scoped_query`.

    Example::

        query = (
            ScopedQueryBuilder()
            .scoped_to("team.id", team_id)
            .scoped_to("project", None)
            .where(text_search(term, "requestTitle"))
            .where(TICKET_STATUS_FACET.predicate(statuses))
            .build()
        )
    """

    def __init__(self) -> None:
        self._scope: list[Predicate] = []
        self._user: list[Predicate] = []
        self._join = LogicalOperator.AND

    def scoped_to(self, field: str, value: Any) -> "ScopedQueryBuilder":
        self._scope.append(Filter.eq(field, value))
        return self

    def scope(self, *predicates: Predicate) -> "ScopedQueryBuilder":
        self._scope.extend(predicates)
        return self

    def where(self, predicate: Predicate | QueryDTO | None) -> "ScopedQueryBuilder":
        """Add a user predicate.  ``None`` (an untouched control) is ignored."""
        if isinstance(predicate, QueryDTO):
            predicate = predicate.predicate
        if predicate is not None:
            self._user.append(predicate)
        return self

    def join(self, logical_operator: LogicalOperator | str) -> "ScopedQueryBuilder":
        """How several ``where`` predicates combine with each other (default AND)."""
        self._join = LogicalOperator(logical_operator)
        return self

    def build(self) -> QueryDTO:
        combine = any_of if self._join is LogicalOperator.OR else all_of
        query = compose_scoped_query(self._scope, combine(*self._user))
        for predicate in self._scope:
            if not is_scoped_by(query, predicate):
                raise InvariantViolationError("Scope filter escaped its AND branch", detail={"scope": predicate.to_dict()})
        return query


__all__ = ["ScopedQueryBuilder", "compose_scoped_query", "is_scoped_by"]
