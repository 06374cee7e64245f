# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for rbac_service read-side helpers."""

import pytest

from src.schemas.rbac import RoleCreate, TeamCreate, UserCreate
from src.services import rbac_service


def add_user(store, name: str, email: str, role_id: str = "user"):
    return store.add_user(UserCreate(email=email, name=name, role_id=role_id))


class TestRolePolicy:
    def test_superadmin_role_cannot_be_deleted(self):
        assert rbac_service.can_delete_role("superadmin") is False

    def test_other_roles_can_be_deleted(self):
        assert rbac_service.can_delete_role("admin") is True
        assert rbac_service.can_delete_role("anything") is True


class TestPermissionViews:
    def test_group_permissions_by_resource(self, store):
        grouped = rbac_service.group_permissions_by_resource(store.permissions)
        assert list(grouped) == ["users", "roles", "teams", "permissions"]
        assert [p.name for p in grouped["permissions"]] == [
            "view_permissions",
            "manage_permissions",
        ]
        assert len(grouped["users"]) == 4

    def test_group_empty(self):
        assert rbac_service.group_permissions_by_resource([]) == {}

    def test_roles_with_permission(self, store):
        roles = rbac_service.roles_with_permission(store, "1")
        assert [r.id for r in roles] == ["superadmin", "admin", "user"]
        roles = rbac_service.roles_with_permission(store, "14")
        assert [r.id for r in roles] == ["superadmin"]

    def test_role_permissions_skips_dangling(self, store):
        role = store.add_role(
            RoleCreate(name="X", description="d", permission_ids=["5", "gone"])
        )
        assert [p.id for p in rbac_service.role_permissions(store, role)] == ["5"]


class TestUserViews:
    def test_count_users_with_role(self, store):
        add_user(store, "A", "a@example.com")
        add_user(store, "B", "b@example.com")
        assert rbac_service.count_users_with_role(store, "user") == 2
        assert rbac_service.count_users_with_role(store, "superadmin") == 1
        assert rbac_service.count_users_with_role(store, "admin") == 0

    def test_team_members_skips_dangling(self, store):
        member = add_user(store, "A", "a@example.com")
        team = store.add_team(
            TeamCreate(name="T", description="d", user_ids=[member.id, "deleted"])
        )
        assert rbac_service.team_members(store, team) == [member]

    def test_search_users(self, store):
        add_user(store, "Alice Smith", "alice@example.com")
        add_user(store, "Bob", "bob@corp.example.org")

        assert [u.name for u in rbac_service.search_users(store, "ALICE")] == [
            "Alice Smith"
        ]
        assert [u.name for u in rbac_service.search_users(store, "corp")] == ["Bob"]
        assert len(rbac_service.search_users(store, None)) == 3
        assert len(rbac_service.search_users(store, "")) == 3


class TestPaginate:
    @pytest.mark.parametrize(
        ("page", "expected"),
        [(1, [0, 1, 2]), (2, [3, 4, 5]), (4, [9]), (5, [])],
    )
    def test_pages(self, page, expected):
        result = rbac_service.paginate(list(range(10)), page, 3)
        assert result.items == expected
        assert result.total == 10
        assert result.total_pages == 4

    def test_empty(self):
        result = rbac_service.paginate([], 1, 10)
        assert result.items == []
        assert result.total_pages == 0
