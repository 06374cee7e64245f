# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for rbac_seed_service."""

from datetime import datetime, timezone

from src.schemas.rbac import TeamCreate
from src.services.rbac_seed_service import build_seed_snapshot, is_empty, seed_store


def test_seed_permissions():
    snapshot = build_seed_snapshot()
    assert [p.id for p in snapshot.permissions] == [str(i) for i in range(1, 15)]
    names = {p.name for p in snapshot.permissions}
    for resource in ("users", "roles", "teams"):
        for action in ("view", "create", "edit", "delete"):
            assert f"{action}_{resource}" in names
    assert "view_permissions" in names
    assert "manage_permissions" in names


def test_seed_roles():
    roles = {r.id: r for r in build_seed_snapshot().roles}
    assert list(roles) == ["superadmin", "admin", "user"]
    assert roles["superadmin"].permission_ids == [str(i) for i in range(1, 15)]
    assert roles["admin"].permission_ids == ["1", "2", "3", "5", "6", "7", "9", "10", "11"]
    assert roles["user"].permission_ids == ["1", "5", "9"]


def test_seed_user_and_teams():
    snapshot = build_seed_snapshot()
    (user,) = snapshot.users
    assert user.id == "superadmin"
    assert user.email == "superadmin@example.com"
    assert user.role_id == "superadmin"
    assert user.is_active is True
    assert [t.name for t in snapshot.teams] == ["Development Team", "Management Team"]
    assert snapshot.teams[1].user_ids == ["superadmin"]


def test_seed_uses_given_timestamp():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    snapshot = build_seed_snapshot(now)
    assert all(r.created_at == now for r in snapshot.roles)
    assert all(t.created_at == now for t in snapshot.teams)


def test_seed_store_populates_empty_store(empty_store):
    assert is_empty(empty_store) is True
    assert seed_store(empty_store) is True
    assert len(empty_store.permissions) == 14
    assert is_empty(empty_store) is False


def test_seed_store_is_idempotent(empty_store):
    empty_store.add_team(TeamCreate(name="Existing", description="d"))
    assert seed_store(empty_store) is False
    assert len(empty_store.teams) == 1
    assert empty_store.permissions == []
