"""Unit tests for facets, text search and the ticket search form."""

from __future__ import annotations

from datetime import datetime

import pytest

from scoped_search.application.search import (
    TICKET_STATUS_FACET,
    Facet,
    TicketSearchForm,
    TicketStatus,
    text_search,
)
from scoped_search.kernel.errors import ValidationError
from scoped_search.kernel.query import Filter, GroupFilter, LogicalOperator

NEW = {"isNew": True, "isCompleted": False}
ASSIGNED = {"isNew": False, "isCompleted": False}
COMPLETED = {"isNew": False, "isCompleted": True}
ALL_STATES = {"New": NEW, "Assigned": ASSIGNED, "Completed": COMPLETED}


def _matching(statuses: list[str]) -> set[str]:
    predicate = TICKET_STATUS_FACET.predicate(statuses)
    return {name for name, row in ALL_STATES.items() if predicate is None or predicate.is_satisfied_by(row)}


# ---------------------------------------------------------------------------
# Status facet
# ---------------------------------------------------------------------------


class TestTicketStatusFacet:
    def test_new_is_is_new_true(self) -> None:
        assert TICKET_STATUS_FACET.predicate(["New"]) == Filter.eq("isNew", True)

    def test_completed_is_is_completed_true(self) -> None:
        assert TICKET_STATUS_FACET.predicate(["Completed"]) == Filter.eq("isCompleted", True)

    def test_assigned_is_absence_of_both_flags(self) -> None:
        assert TICKET_STATUS_FACET.predicate(["Assigned"]) == GroupFilter.of(
            "AND", Filter.eq("isCompleted", False), Filter.eq("isNew", False)
        )

    def test_new_and_assigned(self) -> None:
        predicate = TICKET_STATUS_FACET.predicate(["Assigned", "New"])
        assert predicate == GroupFilter(
            LogicalOperator.OR,
            filters=(Filter.eq("isNew", True),),
            groups=(GroupFilter.of("AND", Filter.eq("isCompleted", False), Filter.eq("isNew", False)),),
        )
        assert _matching(["New", "Assigned"]) == {"New", "Assigned"}

    def test_all_three_match_every_row(self) -> None:
        assert _matching(["New", "Assigned", "Completed"]) == {"New", "Assigned", "Completed"}
        predicate = TICKET_STATUS_FACET.predicate(["New", "Assigned", "Completed"])
        assert predicate.is_satisfied_by({"isNew": True, "isCompleted": True})

    def test_single_states(self) -> None:
        assert _matching(["New"]) == {"New"}
        assert _matching(["Assigned"]) == {"Assigned"}
        assert _matching(["Completed"]) == {"Completed"}

    def test_empty_selection_constrains_nothing(self) -> None:
        assert TICKET_STATUS_FACET.predicate([]) is None

    def test_accepts_enum_members(self) -> None:
        assert TICKET_STATUS_FACET.predicate([TicketStatus.NEW]) == Filter.eq("isNew", True)

    def test_unknown_option_is_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TICKET_STATUS_FACET.predicate(["New", "Escalated"])
        assert exc_info.value.errors == [{"loc": "status[1]", "msg": "unknown option 'Escalated'"}]

    def test_duplicates_collapse(self) -> None:
        assert TICKET_STATUS_FACET.predicate(["New", "New"]) == Filter.eq("isNew", True)


class TestFacet:
    def test_options_keep_declaration_order(self) -> None:
        facet = Facet("role", {"owner": Filter.eq("role", "OWNER"), "member": Filter.eq("role", "MEMBER")})
        assert facet.options == ("owner", "member")
        assert facet.predicate(["member", "owner"]) == GroupFilter.of(
            "OR", Filter.eq("role", "OWNER"), Filter.eq("role", "MEMBER")
        )

    def test_bare_string_is_one_selection(self) -> None:
        assert TICKET_STATUS_FACET.predicate("New") == Filter.eq("isNew", True)
        assert TicketSearchForm(statuses="New").to_predicate() == Filter.eq("isNew", True)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Text search
# ---------------------------------------------------------------------------


class TestTextSearch:
    def test_blank_is_none(self) -> None:
        assert text_search("") is None
        assert text_search(None, "name") is None
        assert text_search("   ", "name") is None

    def test_single_field(self) -> None:
        assert text_search("login bug", "requestTitle") == Filter.like("requestTitle", "%login bug%")

    def test_several_fields_are_or_combined(self) -> None:
        predicate = text_search("ann", "email", "firstName", "lastName")
        assert predicate.logical_operator is LogicalOperator.OR
        assert predicate.is_satisfied_by({"email": "x@y.z", "firstName": "Joanne", "lastName": "Doe"})


# ---------------------------------------------------------------------------
# TicketSearchForm
# ---------------------------------------------------------------------------


class TestTicketSearchForm:
    def test_empty_form_is_none(self) -> None:
        assert TicketSearchForm().to_predicate() is None

    def test_priority(self) -> None:
        assert TicketSearchForm(priority="High").to_predicate() == Filter.eq("priority", 1)

    def test_unknown_priority(self) -> None:
        with pytest.raises(ValidationError):
            TicketSearchForm(priority="Urgent").to_predicate()

    def test_unassigned(self) -> None:
        assert TicketSearchForm(assignee="unassigned").to_predicate() == Filter.eq("assignUser.id", None)

    def test_me_requires_user(self) -> None:
        assert TicketSearchForm(assignee="me", current_user_id=5).to_predicate() == Filter.eq("assignUser.id", 5)
        with pytest.raises(ValidationError):
            TicketSearchForm(assignee="me").to_predicate()

    def test_date_range(self) -> None:
        form = TicketSearchForm(created_from=datetime(2024, 5, 1), created_to=datetime(2024, 6, 1))
        assert form.to_predicate() == GroupFilter.of(
            "AND",
            Filter.gt("createdAt", "2024-05-01T00:00:00"),
            Filter.lt("createdAt", "2024-06-01T00:00:00"),
        )

    def test_parts_are_and_combined_by_default(self) -> None:
        predicate = TicketSearchForm(text="login", statuses=("New",), priority="Critical").to_predicate()
        assert predicate.logical_operator is LogicalOperator.AND
        assert len(predicate.children) == 3
