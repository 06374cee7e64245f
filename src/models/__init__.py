# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.base import Base, TimestampMixin
from src.models.enums import PermissionAction, PermissionResource
from src.models.store_snapshot import StoreSnapshotModel

__all__ = [
    "Base",
    "PermissionAction",
    "PermissionResource",
    "StoreSnapshotModel",
    "TimestampMixin",
]
