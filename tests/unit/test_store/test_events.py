# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the store event bus."""

import logging
from datetime import datetime, timezone

import pytest

from src.store.events import MUTATION_EVENTS, EventBus, EventPayload, StoreEvent


class TestStoreEvent:
    """Tests for StoreEvent enum."""

    def test_entity_events(self):
        assert StoreEvent.USER_CREATED.value == "user.created"
        assert StoreEvent.ROLE_UPDATED.value == "role.updated"
        assert StoreEvent.PERMISSION_DELETED.value == "permission.deleted"
        assert StoreEvent.TEAM_CREATED.value == "team.created"

    def test_session_events_are_not_mutations(self):
        """Test login/logout do not count as persisted-state changes."""
        assert StoreEvent.SESSION_LOGIN not in MUTATION_EVENTS
        assert StoreEvent.SESSION_LOGOUT not in MUTATION_EVENTS
        assert StoreEvent.STATE_IMPORTED in MUTATION_EVENTS
        assert len(MUTATION_EVENTS) == 13


class TestEventBus:
    """Tests for EventBus class."""

    @pytest.fixture
    def event_bus(self):
        """Create a fresh EventBus for each test."""
        return EventBus()

    def test_subscribe_and_publish(self, event_bus):
        received = []
        event_bus.subscribe(StoreEvent.USER_CREATED, received.append, "test")

        event_bus.publish(StoreEvent.USER_CREATED, {"id": "42"})

        assert len(received) == 1
        payload = received[0]
        assert isinstance(payload, EventPayload)
        assert payload.event_type == StoreEvent.USER_CREATED
        assert payload.data == {"id": "42"}
        assert payload.timestamp <= datetime.now(timezone.utc)

    def test_publish_only_reaches_matching_event(self, event_bus):
        received = []
        event_bus.subscribe(StoreEvent.USER_CREATED, received.append)

        event_bus.publish(StoreEvent.USER_DELETED, {"id": "42"})

        assert received == []

    def test_publish_without_subscribers(self, event_bus):
        event_bus.publish(StoreEvent.TEAM_DELETED, {})

    def test_subscribe_many(self, event_bus):
        received = []
        event_bus.subscribe_many(
            [StoreEvent.ROLE_CREATED, StoreEvent.ROLE_DELETED], received.append, "x"
        )
        assert event_bus.get_subscriber_count(StoreEvent.ROLE_CREATED) == 1
        assert event_bus.get_subscriber_count(StoreEvent.ROLE_DELETED) == 1
        assert event_bus.get_subscriber_count(StoreEvent.ROLE_UPDATED) == 0

    def test_unsubscribe_handler(self, event_bus):
        def handler(payload):
            pass

        event_bus.subscribe(StoreEvent.USER_CREATED, handler, "test")
        event_bus.unsubscribe(StoreEvent.USER_CREATED, handler, "test")
        assert event_bus.get_subscriber_count(StoreEvent.USER_CREATED) == 0

    def test_unsubscribe_all(self, event_bus):
        def handler(payload):
            pass

        event_bus.subscribe_many(MUTATION_EVENTS, handler, "persistence")
        event_bus.subscribe(StoreEvent.USER_CREATED, handler, "other")

        event_bus.unsubscribe_all("persistence")

        assert event_bus.get_subscriber_count(StoreEvent.USER_CREATED) == 1
        assert event_bus.get_subscriber_count(StoreEvent.TEAM_DELETED) == 0

    def test_handler_error_does_not_stop_others(self, event_bus):
        received = []

        def broken(payload):
            raise ValueError("boom")

        event_bus.subscribe(StoreEvent.USER_UPDATED, broken)
        event_bus.subscribe(StoreEvent.USER_UPDATED, received.append)

        event_bus.publish(StoreEvent.USER_UPDATED, {"id": "1"})

        assert len(received) == 1

    def test_handler_error_is_logged_with_traceback(self, event_bus, caplog):
        def broken(payload):
            raise ValueError("boom")

        event_bus.subscribe(StoreEvent.USER_UPDATED, broken, "persistence")

        with caplog.at_level(logging.ERROR, logger="src.store.events"):
            event_bus.publish(StoreEvent.USER_UPDATED, {"id": "1"})

        (record,) = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert "subscriber: persistence" in record.getMessage()
        assert record.exc_info is not None
        assert record.exc_info[0] is ValueError
