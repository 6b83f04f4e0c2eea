"""Application search – searchable entities of the ticketing portal."""
from __future__ import annotations

from scoped_search.application.search.fields import EntitySchema, SchemaRegistry

TEAMS = EntitySchema(
    name="teams",
    resource_base="/api/teams",
    filterable=frozenset({"id", "name", "slogan", "description", "users.id", "createdAt"}),
    sortable=frozenset({"id", "name", "createdAt"}),
)

USERS = EntitySchema(
    name="users",
    resource_base="/api/users",
    filterable=frozenset({
        "id", "email", "firstName", "lastName", "title", "status",
        "isDeleted", "manager.id", "lastLoginTime",
    }),
    sortable=frozenset({"id", "email", "firstName", "lastName", "lastLoginTime"}),
)

TEAM_REQUESTS = EntitySchema(
    name="team-requests",
    resource_base="/api/team-requests",
    filterable=frozenset({
        "id", "team.id", "project", "project.id", "workflow.id",
        "requestUser.id", "assignUser.id", "currentState.id", "currentState",
        "requestTitle", "requestDescription", "priority", "channel",
        "isNew", "isCompleted", "createdAt", "modifiedAt",
        "estimatedCompletionDate", "actualCompletionDate",
    }),
    sortable=frozenset({
        "id", "requestTitle", "priority", "createdAt", "modifiedAt",
        "estimatedCompletionDate", "actualCompletionDate",
    }),
)

PROJECTS = EntitySchema(
    name="projects",
    resource_base="/api/projects",
    filterable=frozenset({"id", "team.id", "name", "description", "status", "createdAt"}),
    sortable=frozenset({"id", "name", "status", "createdAt"}),
)

WORKFLOWS = EntitySchema(
    name="workflows",
    resource_base="/api/workflows",
    filterable=frozenset({"id", "name", "requestName", "owner.id", "team.id"}),
    sortable=frozenset({"id", "name", "requestName"}),
)

AUTHORITIES = EntitySchema(
    name="authorities",
    resource_base="/api/authorities",
    filterable=frozenset({"name", "descriptiveName", "systemRole"}),
    sortable=frozenset({"name", "descriptiveName"}),
)

ALL_SCHEMAS: tuple[EntitySchema, ...] = (TEAMS, USERS, TEAM_REQUESTS, PROJECTS, WORKFLOWS, AUTHORITIES)


def default_registry() -> SchemaRegistry:
    return SchemaRegistry(ALL_SCHEMAS)


__all__ = [
    "ALL_SCHEMAS",
    "AUTHORITIES",
    "PROJECTS",
    "TEAMS",
    "TEAM_REQUESTS",
    "USERS",
    "WORKFLOWS",
    "default_registry",
]
