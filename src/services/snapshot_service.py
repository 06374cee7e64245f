# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Whole-state persistence for the authorization store.

The store never reads or writes storage itself. The application loads a
snapshot at startup and saves one after each mutation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from src.config import settings
from src.models import StoreSnapshotModel
from src.schemas.rbac import StoreSnapshot
from src.store.events import MUTATION_EVENTS, EventPayload

if TYPE_CHECKING:
    from src.store import AuthorizationStore

logger = logging.getLogger(__name__)

PERSISTENCE_SUBSCRIBER = "snapshot-persistence"


def load_snapshot(db: Session, key: str | None = None) -> StoreSnapshot | None:
    """Load the stored snapshot, or None if nothing has been saved yet."""
    key = key or settings.snapshot_key
    row = db.get(StoreSnapshotModel, key)
    if row is None:
        return None
    return StoreSnapshot.model_validate_json(row.payload)


def save_snapshot(
    db: Session, store: AuthorizationStore, key: str | None = None
) -> None:
    """Write the store's current collections, replacing any previous snapshot."""
    key = key or settings.snapshot_key
    payload = store.export_snapshot().model_dump_json()

    row = db.get(StoreSnapshotModel, key)
    if row is None:
        db.add(StoreSnapshotModel(key=key, payload=payload))
    else:
        row.payload = payload
    db.commit()
    logger.debug(f"Saved snapshot {key} ({len(payload)} bytes)")


def restore_or_seed(
    db: Session, store: AuthorizationStore, key: str | None = None
) -> bool:
    """Load the saved snapshot into the store, or seed and save on first run.

    Returns:
        True if an existing snapshot was restored
    """
    from src.services.rbac_seed_service import seed_store

    snapshot = load_snapshot(db, key)
    if snapshot is not None:
        store.import_snapshot(snapshot)
        logger.info("Restored authorization store from snapshot")
        return True

    seed_store(store)
    save_snapshot(db, store, key)
    return False


def attach_persistence(
    store: AuthorizationStore,
    session_factory: Callable[[], Session],
    key: str | None = None,
) -> None:
    """Save a snapshot after every mutation published by the store."""

    def handler(payload: EventPayload) -> None:
        db = session_factory()
        try:
            save_snapshot(db, store, key)
        finally:
            db.close()

    store.events.subscribe_many(MUTATION_EVENTS, handler, PERSISTENCE_SUBSCRIBER)
    logger.info("Snapshot persistence attached")


def detach_persistence(store: AuthorizationStore) -> None:
    """Stop saving snapshots on mutation."""
    store.events.unsubscribe_all(PERSISTENCE_SUBSCRIBER)
