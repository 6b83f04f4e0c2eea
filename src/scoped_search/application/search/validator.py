"""Application search – structural validation of QueryDTO and Pagination.

Every violation is collected and raised as a single
:class:`~scoped_search.kernel.errors.ValidationError` before any network call.
"""
from __future__ import annotations

from typing import Any

from scoped_search.application.pagination import Pagination, SortDirection
from scoped_search.application.search.fields import EntitySchema
from scoped_search.kernel.errors import ValidationError
from scoped_search.kernel.query import Filter, GroupFilter, LogicalOperator, Operator, QueryDTO
from scoped_search.kernel.query.operators import LOGICAL_OPERATOR_VALUES, OPERATOR_VALUES, RANGE_OPERATORS

_SCALARS = (str, int, float, bool, type(None))

Violation = dict[str, Any]


class QueryValidator:
    """Check predicate trees and page requests against an optional entity allow-list."""

    def __init__(self, schema: EntitySchema | None = None, max_page_size: int = 1000) -> None:
        self._schema = schema
        self._max_page_size = max_page_size

    @property
    def schema(self) -> EntitySchema | None:
        return self._schema

    def validate(self, query: QueryDTO, pagination: Pagination) -> None:
        errors = self.query_violations(query) + self.pagination_violations(pagination)
        if errors:
            raise ValidationError("Invalid search request", errors=errors)

    def validate_query(self, query: QueryDTO) -> None:
        errors = self.query_violations(query)
        if errors:
            raise ValidationError("Invalid query", errors=errors)

    def validate_pagination(self, pagination: Pagination) -> None:
        errors = self.pagination_violations(pagination)
        if errors:
            raise ValidationError("Invalid pagination", errors=errors)

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def query_violations(self, query: QueryDTO) -> list[Violation]:
        errors: list[Violation] = []
        if not isinstance(query, QueryDTO):
            return [{"loc": "query", "msg": f"expected QueryDTO, got {type(query).__name__}"}]
        for index, item in enumerate(query.filters):
            self._check_filter(item, f"filters[{index}]", errors)
        for index, group in enumerate(query.groups):
            self._check_group(group, f"groups[{index}]", errors)
        return errors

    def _check_group(self, group: GroupFilter, loc: str, errors: list[Violation]) -> None:
        op = group.logical_operator
        if not isinstance(op, LogicalOperator) and not _is_known(op, LOGICAL_OPERATOR_VALUES):
            errors.append({"loc": f"{loc}.logicalOperator", "msg": f"unknown logical operator {op!r}"})
        for index, item in enumerate(group.filters):
            self._check_filter(item, f"{loc}.filters[{index}]", errors)
        for index, child in enumerate(group.groups):
            self._check_group(child, f"{loc}.groups[{index}]", errors)

    def _check_filter(self, item: Filter, loc: str, errors: list[Violation]) -> None:
        if not isinstance(item.field, str) or not item.field.strip():
            errors.append({"loc": f"{loc}.field", "msg": "field must be a non-empty string"})
        elif self._schema is not None and not self._schema.allows_filter(item.field):
            errors.append({
                "loc": f"{loc}.field",
                "msg": f"field {item.field!r} is not filterable on {self._schema.name}",
            })

        if not isinstance(item.operator, Operator) and not _is_known(item.operator, OPERATOR_VALUES):
            errors.append({"loc": f"{loc}.operator", "msg": f"unknown operator {item.operator!r}"})
            return
        message = _value_violation(Operator(item.operator), item.value)
        if message:
            errors.append({"loc": f"{loc}.value", "msg": message})

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def pagination_violations(self, pagination: Pagination) -> list[Violation]:
        errors: list[Violation] = []
        if not _is_int(pagination.page) or pagination.page < 1:
            errors.append({"loc": "page", "msg": "page must be an integer >= 1"})
        if not _is_int(pagination.size) or pagination.size < 1:
            errors.append({"loc": "size", "msg": "size must be an integer >= 1"})
        elif pagination.size > self._max_page_size:
            errors.append({"loc": "size", "msg": f"size must be <= {self._max_page_size}"})

        seen: set[str] = set()
        for index, entry in enumerate(pagination.sort):
            loc = f"sort[{index}]"
            if not isinstance(entry.field, str) or not entry.field.strip():
                errors.append({"loc": f"{loc}.field", "msg": "sort field must be a non-empty string"})
            elif self._schema is not None and not self._schema.allows_sort(entry.field):
                errors.append({
                    "loc": f"{loc}.field",
                    "msg": f"field {entry.field!r} is not sortable on {self._schema.name}",
                })
            elif entry.field in seen:
                errors.append({"loc": f"{loc}.field", "msg": f"duplicate sort field {entry.field!r}"})
            else:
                seen.add(entry.field)
            if not isinstance(entry.direction, SortDirection):
                errors.append({"loc": f"{loc}.direction", "msg": f"unknown sort direction {entry.direction!r}"})
        return errors


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_known(value: Any, known: frozenset[str]) -> bool:
    return isinstance(value, str) and value in known


def _value_violation(op: Operator, value: Any) -> str | None:  # noqa: PLR0911
    if op is Operator.IN:
        if not isinstance(value, (tuple, list)) or not value:
            return "'in' requires a non-empty list"
        if not all(isinstance(v, _SCALARS) for v in value):
            return "'in' values must be scalars"
        return None
    if op is Operator.LK:
        if not isinstance(value, str):
            return "'lk' requires a string pattern"
        return None
    if op in RANGE_OPERATORS:
        if value is None or isinstance(value, bool) or not isinstance(value, _SCALARS):
            return f"{op.value!r} requires a non-null scalar"
        return None
    if not isinstance(value, _SCALARS):
        return f"{op.value!r} requires a scalar or null"
    return None


__all__ = ["QueryValidator"]
