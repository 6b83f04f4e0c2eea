"""Unit tests for entity schemas and the registry."""

from __future__ import annotations

import pytest

from scoped_search.application.search import EntitySchema, SchemaRegistry, default_registry
from scoped_search.application.search.resources import TEAM_REQUESTS


class TestEntitySchema:
    def test_search_path(self) -> None:
        schema = EntitySchema("teams", "/api/teams/", filterable=frozenset({"id"}))
        assert schema.search_path == "/api/teams/search"

    def test_allow_lists(self) -> None:
        assert TEAM_REQUESTS.allows_filter("team.id")
        assert not TEAM_REQUESTS.allows_filter("requestUser.password")
        assert TEAM_REQUESTS.allows_sort("createdAt")
        assert not TEAM_REQUESTS.allows_sort("team.id")

    def test_sets_are_frozen(self) -> None:
        schema = EntitySchema("x", "/api/x", filterable={"a"}, sortable={"a"})  # type: ignore[arg-type]
        assert isinstance(schema.filterable, frozenset)
        assert isinstance(schema.sortable, frozenset)


class TestSchemaRegistry:
    def test_default_registry(self) -> None:
        registry = default_registry()
        assert registry.names() == ["authorities", "projects", "team-requests", "teams", "users", "workflows"]
        assert registry.get("team-requests") is TEAM_REQUESTS
        assert "teams" in registry
        assert len(registry) == 6

    def test_duplicate_name_rejected(self) -> None:
        registry = SchemaRegistry([TEAM_REQUESTS])
        with pytest.raises(ValueError):
            registry.register(TEAM_REQUESTS)

    def test_unknown_entity(self) -> None:
        with pytest.raises(KeyError):
            SchemaRegistry().get("tickets")
