# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Seed data for a fresh authorization store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from src.rbac.accounts import DEFAULT_TEAMS, DEFAULT_USERS
from src.rbac.permissions import CORE_PERMISSIONS
from src.rbac.roles import DEFAULT_ROLES
from src.schemas.rbac import Permission, Role, StoreSnapshot, Team, User

if TYPE_CHECKING:
    from src.store import AuthorizationStore

logger = logging.getLogger(__name__)


def build_seed_snapshot(now: datetime | None = None) -> StoreSnapshot:
    """Build the first-run state: 14 permissions, 3 roles, 1 user, 2 teams."""
    created_at = now or datetime.now(timezone.utc)
    return StoreSnapshot(
        permissions=[Permission(**p) for p in CORE_PERMISSIONS],
        roles=[Role(created_at=created_at, **r) for r in DEFAULT_ROLES],
        users=[User(created_at=created_at, **u) for u in DEFAULT_USERS],
        teams=[Team(created_at=created_at, **t) for t in DEFAULT_TEAMS],
    )


def is_empty(store: AuthorizationStore) -> bool:
    """Check whether all four collections are empty."""
    return not (store.users or store.roles or store.permissions or store.teams)


def seed_store(store: AuthorizationStore) -> bool:
    """Seed the store with the default data.

    This function is idempotent: a store that already holds any entity is
    left alone.
    @param store: store to seed
    @return: True if seed data was loaded
    """
    if not is_empty(store):
        logger.debug("Store already populated, skipping seed")
        return False

    store.import_snapshot(build_seed_snapshot())
    logger.info("Seeded authorization store with default data")
    return True
