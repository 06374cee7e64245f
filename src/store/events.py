# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Event bus for authorization store notifications."""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class StoreEvent(str, Enum):
    """Events published by the authorization store."""

    # User events
    USER_CREATED = "user.created"
    USER_UPDATED = "user.updated"
    USER_DELETED = "user.deleted"

    # Role events
    ROLE_CREATED = "role.created"
    ROLE_UPDATED = "role.updated"
    ROLE_DELETED = "role.deleted"

    # Permission events
    PERMISSION_CREATED = "permission.created"
    PERMISSION_UPDATED = "permission.updated"
    PERMISSION_DELETED = "permission.deleted"

    # Team events
    TEAM_CREATED = "team.created"
    TEAM_UPDATED = "team.updated"
    TEAM_DELETED = "team.deleted"

    # Whole-state replacement
    STATE_IMPORTED = "state.imported"

    # Session events
    SESSION_LOGIN = "session.login"
    SESSION_LOGOUT = "session.logout"


# Events that change persisted state
MUTATION_EVENTS: frozenset[StoreEvent] = frozenset(
    event
    for event in StoreEvent
    if event not in (StoreEvent.SESSION_LOGIN, StoreEvent.SESSION_LOGOUT)
)


@dataclass
class EventPayload:
    """Payload for a store event."""

    event_type: StoreEvent
    timestamp: datetime
    data: dict[str, Any]


# Type alias for event handlers
EventHandler = Callable[[EventPayload], Any]


class EventBus:
    """Synchronous event bus.

    Handlers run in subscription order on the publishing thread. A handler
    that raises is logged and does not stop the remaining handlers.
    """

    def __init__(self) -> None:
        self._handlers: dict[StoreEvent, list[tuple[str | None, EventHandler]]] = (
            defaultdict(list)
        )

    def subscribe(
        self,
        event_type: StoreEvent,
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Subscribe to an event.

        Args:
            event_type: Event type to subscribe to
            handler: Function to call when the event fires
            subscriber_id: Identifier used to unsubscribe as a group
        """
        self._handlers[event_type].append((subscriber_id, handler))
        logger.debug(
            f"Subscribed {subscriber_id or 'anonymous handler'} "
            f"to event {event_type.value}"
        )

    def subscribe_many(
        self,
        event_types: frozenset[StoreEvent] | list[StoreEvent],
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Subscribe one handler to several events."""
        for event_type in event_types:
            self.subscribe(event_type, handler, subscriber_id)

    def unsubscribe(
        self,
        event_type: StoreEvent,
        handler: EventHandler,
        subscriber_id: str | None = None,
    ) -> None:
        """Unsubscribe a handler from an event."""
        entry = (subscriber_id, handler)
        if entry in self._handlers[event_type]:
            self._handlers[event_type].remove(entry)

    def unsubscribe_all(self, subscriber_id: str) -> None:
        """Remove every handler registered under a subscriber id."""
        for event_type in list(self._handlers.keys()):
            self._handlers[event_type] = [
                (sid, handler)
                for sid, handler in self._handlers[event_type]
                if sid != subscriber_id
            ]

        logger.debug(f"Unsubscribed all handlers for {subscriber_id}")

    def publish(self, event_type: StoreEvent, data: dict[str, Any]) -> None:
        """Publish an event to all subscribers.

        Args:
            event_type: Type of event
            data: Event data payload
        """
        payload = EventPayload(
            event_type=event_type,
            timestamp=datetime.now(timezone.utc),
            data=data,
        )

        for subscriber_id, handler in list(self._handlers.get(event_type, [])):
            try:
                handler(payload)
            except Exception as e:
                logger.exception(
                    f"Error in event handler for {event_type.value} "
                    f"(subscriber: {subscriber_id}): {e}"
                )

    def get_subscriber_count(self, event_type: StoreEvent) -> int:
        """Get the number of subscribers for an event type."""
        return len(self._handlers.get(event_type, []))
