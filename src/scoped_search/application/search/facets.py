"""Application search – facets and form-driven user predicates."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from datetime import datetime
from enum import Enum

from scoped_search.kernel.errors import ValidationError
from scoped_search.kernel.query import Filter, GroupFilter, LogicalOperator, Predicate, all_of, any_of


def text_search(term: str | None, *fields: str) -> Predicate | None:
    """``lk "%term%"`` over *fields* (OR-combined); ``None`` for a blank term."""
    if term is None or not term.strip():
        return None
    return any_of(*(Filter.contains(field, term.strip()) for field in fields))


class Facet:
    """Checkable options, each standing for its own sub-predicate.

    Checked options are OR-combined in declaration order.  An empty selection
    constrains nothing and yields ``None``.
    """

    def __init__(self, name: str, options: Mapping[str, Predicate]) -> None:
        self.name = name
        self._options = dict(options)

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    def predicate(self, selection: str | Iterable[str]) -> Predicate | None:
        """OR of the selected options.  A bare string is a one-option selection."""
        if isinstance(selection, str):
            selection = (selection,)
        selected = set()
        errors = []
        for index, option in enumerate(selection):
            key = option.value if isinstance(option, Enum) else option
            if key not in self._options:
                errors.append({"loc": f"{self.name}[{index}]", "msg": f"unknown option {key!r}"})
            selected.add(key)
        if errors:
            raise ValidationError(f"Invalid {self.name} selection", errors=errors)
        return any_of(*(pred for key, pred in self._options.items() if key in selected))


class TicketStatus(str, Enum):
    NEW = "New"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


# "Assigned" has no flag of its own: it is neither new nor completed.
TICKET_STATUS_FACET = Facet(
    "status",
    {
        TicketStatus.NEW.value: Filter.eq("isNew", True),
        TicketStatus.ASSIGNED.value: GroupFilter.of(
            LogicalOperator.AND,
            Filter.eq("isCompleted", False),
            Filter.eq("isNew", False),
        ),
        TicketStatus.COMPLETED.value: Filter.eq("isCompleted", True),
    },
)

PRIORITY_CODES: dict[str, int] = {
    "Critical": 0,
    "High": 1,
    "Medium": 2,
    "Low": 3,
    "Trivial": 4,
}


@dataclasses.dataclass(frozen=True)
class TicketSearchForm:
    """State of the advanced ticket search panel."""

    text: str = ""
    statuses: tuple[str, ...] = ()
    priority: str | None = None
    assignee: str | None = None
    current_user_id: int | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None
    join: LogicalOperator = LogicalOperator.AND

    def to_predicate(self) -> Predicate | None:
        """User predicate for this panel (scope is added by the caller)."""
        parts = [
            text_search(self.text, "requestTitle"),
            TICKET_STATUS_FACET.predicate(self.statuses),
            self._priority(),
            self._assignee(),
            self._created_range(),
        ]
        if LogicalOperator(self.join) is LogicalOperator.OR:
            return any_of(*parts)
        return all_of(*parts)

    def _priority(self) -> Predicate | None:
        if not self.priority:
            return None
        if self.priority not in PRIORITY_CODES:
            raise ValidationError(
                "Invalid priority",
                errors=[{"loc": "priority", "msg": f"unknown priority {self.priority!r}"}],
            )
        return Filter.eq("priority", PRIORITY_CODES[self.priority])

    def _assignee(self) -> Predicate | None:
        if not self.assignee:
            return None
        if self.assignee == "unassigned":
            return Filter.eq("assignUser.id", None)
        if self.assignee == "me":
            if self.current_user_id is None:
                raise ValidationError(
                    "Invalid assignee",
                    errors=[{"loc": "assignee", "msg": "'me' requires a signed-in user"}],
                )
            return Filter.eq("assignUser.id", self.current_user_id)
        raise ValidationError(
            "Invalid assignee",
            errors=[{"loc": "assignee", "msg": f"unknown assignee {self.assignee!r}"}],
        )

    def _created_range(self) -> Predicate | None:
        return all_of(
            Filter.gt("createdAt", self.created_from.isoformat()) if self.created_from else None,
            Filter.lt("createdAt", self.created_to.isoformat()) if self.created_to else None,
        )


__all__ = [
    "Facet",
    "PRIORITY_CODES",
    "TICKET_STATUS_FACET",
    "TicketSearchForm",
    "TicketStatus",
    "text_search",
]
