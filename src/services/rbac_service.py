# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Read-side helpers built on top of the authorization store.

These are the views the admin screens need (grouping, counts, member
lists, search, paging). None of them take part in authorization; that is
``AuthorizationStore.has_permission`` alone.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from src.rbac.roles import SUPERADMIN_ROLE_ID
from src.schemas.rbac import Permission, Role, Team, User

if TYPE_CHECKING:
    from src.store import AuthorizationStore

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """A slice of a sequence plus paging metadata."""

    items: list[T]
    total: int
    page: int
    per_page: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.per_page) if self.total else 0


def can_delete_role(role_id: str) -> bool:
    """Deletion policy: the superadmin role is never deleted via the API."""
    return role_id != SUPERADMIN_ROLE_ID


def group_permissions_by_resource(
    permissions: Sequence[Permission],
) -> dict[str, list[Permission]]:
    """Group permissions by resource, keeping first-seen resource order."""
    grouped: dict[str, list[Permission]] = {}
    for permission in permissions:
        grouped.setdefault(permission.resource, []).append(permission)
    return grouped


def role_permissions(store: AuthorizationStore, role: Role) -> list[Permission]:
    """Get the permissions a role references that still exist."""
    granted = set(role.permission_ids)
    return [p for p in store.permissions if p.id in granted]


def roles_with_permission(store: AuthorizationStore, permission_id: str) -> list[Role]:
    """Get all roles whose permission list contains an id."""
    return [r for r in store.roles if permission_id in r.permission_ids]


def count_users_with_role(store: AuthorizationStore, role_id: str) -> int:
    """Count users assigned to a role."""
    return sum(1 for u in store.users if u.role_id == role_id)


def team_members(store: AuthorizationStore, team: Team) -> list[User]:
    """Get the users of a team, skipping ids that no longer resolve."""
    member_ids = set(team.user_ids)
    return [u for u in store.users if u.id in member_ids]


def search_users(store: AuthorizationStore, query: str | None) -> list[User]:
    """Filter users by a case-insensitive match on name or email."""
    if not query:
        return store.users
    needle = query.lower()
    return [
        u for u in store.users if needle in u.name.lower() or needle in u.email.lower()
    ]


def paginate(items: Sequence[T], page: int, per_page: int) -> Page[T]:
    """Return one page of items. Pages are 1-based."""
    start = (page - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        total=len(items),
        page=page,
        per_page=per_page,
    )
