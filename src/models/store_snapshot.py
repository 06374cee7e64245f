# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Persisted authorization store snapshots."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import Base, TimestampMixin


class StoreSnapshotModel(Base, TimestampMixin):
    """Whole-state snapshot of the authorization store.

    The payload is the JSON form of the four collections; session state is
    never written here.
    """

    __tablename__ = "store_snapshots"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False)
