# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization store package."""

from src.store.authorization_store import AuthorizationStore
from src.store.events import EventBus, EventPayload, StoreEvent

__all__ = [
    "AuthorizationStore",
    "EventBus",
    "EventPayload",
    "StoreEvent",
]
