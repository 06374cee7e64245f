# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-memory authorization store.

Holds the four RBAC collections (users, roles, permissions, teams) and the
single process-wide session. Cross-entity links are plain id fields with no
enforced referential integrity: updates and deletes never touch other
collections, and resolution treats an id that does not resolve as absent.

None of the operations raise for well-typed input. Unknown ids make
``update_*`` and ``delete_*`` silent no-ops and make the queries return
empty results.

Entities handed out by the store are copies. Changing one has no effect on
the store; ``update_*`` is the only way to change a stored field.
"""

import logging
import threading
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TypeVar

from pydantic import BaseModel

from src.schemas.auth import SessionState
from src.schemas.rbac import (
    Permission,
    PermissionCreate,
    PermissionUpdate,
    Role,
    RoleCreate,
    RoleUpdate,
    StoreSnapshot,
    Team,
    TeamCreate,
    TeamUpdate,
    User,
    UserCreate,
    UserUpdate,
)
from src.services import auth_service
from src.store.events import EventBus, StoreEvent

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

Authenticator = Callable[[str, str], bool]


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _copy(entity: EntityT | None) -> EntityT | None:
    return entity.model_copy(deep=True) if entity is not None else None


class AuthorizationStore:
    """Registry of users, roles, permissions and teams plus session state.

    The store is created once by the application's composition root and
    handed to whatever needs it; it is not a module-level singleton.

    All access goes through one re-entrant lock, so a mutation and the
    events it publishes finish before another thread reads or writes.
    Handlers may call back into the store.
    """

    def __init__(
        self,
        authenticator: Authenticator | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """Initialize an empty store.

        Args:
            authenticator: Credential check used by ``login``. Defaults to
                the stand-in check in ``auth_service``.
            event_bus: Bus that receives one event per mutation
        """
        self._users: dict[str, User] = {}
        self._roles: dict[str, Role] = {}
        self._permissions: dict[str, Permission] = {}
        self._teams: dict[str, Team] = {}
        self._current_user_id: str | None = None
        self._is_authenticated = False
        self._authenticator = authenticator or auth_service.verify_credentials
        self._lock = threading.RLock()
        self.events = event_bus or EventBus()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def users(self) -> list[User]:
        with self._lock:
            return [u.model_copy(deep=True) for u in self._users.values()]

    @property
    def roles(self) -> list[Role]:
        with self._lock:
            return [r.model_copy(deep=True) for r in self._roles.values()]

    @property
    def permissions(self) -> list[Permission]:
        with self._lock:
            return [p.model_copy(deep=True) for p in self._permissions.values()]

    @property
    def teams(self) -> list[Team]:
        with self._lock:
            return [t.model_copy(deep=True) for t in self._teams.values()]

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            return _copy(self._users.get(user_id))

    def get_role(self, role_id: str) -> Role | None:
        with self._lock:
            return _copy(self._roles.get(role_id))

    def get_permission(self, permission_id: str) -> Permission | None:
        with self._lock:
            return _copy(self._permissions.get(permission_id))

    def get_team(self, team_id: str) -> Team | None:
        with self._lock:
            return _copy(self._teams.get(team_id))

    def get_user_by_email(self, email: str) -> User | None:
        """Return the first user with this email, in insertion order."""
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return user.model_copy(deep=True)
        return None

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    @property
    def current_user(self) -> User | None:
        """The logged-in user, or None if the session is empty.

        Resolved against the users collection on every access, so it reflects
        later updates and becomes None if the user is deleted.
        """
        with self._lock:
            if self._current_user_id is None:
                return None
            return _copy(self._users.get(self._current_user_id))

    @property
    def is_authenticated(self) -> bool:
        return self._is_authenticated

    @property
    def session(self) -> SessionState:
        with self._lock:
            return SessionState(
                current_user=self.current_user,
                is_authenticated=self._is_authenticated,
            )

    def login(self, email: str, password: str) -> bool:
        """Authenticate and open the session.

        Returns True only when the credential check passes and a user with
        ``email`` exists. On failure the session is left untouched.
        """
        if not self._authenticator(email, password):
            logger.warning(f"Login rejected for {email}: bad credentials")
            return False

        with self._lock:
            user = self.get_user_by_email(email)
            if user is None:
                logger.warning(f"Login rejected for {email}: no such user")
                return False

            self._current_user_id = user.id
            self._is_authenticated = True
            logger.info(f"User {user.id} logged in")
            self.events.publish(StoreEvent.SESSION_LOGIN, {"user_id": user.id})
        return True

    def logout(self) -> None:
        """Reset the session unconditionally."""
        with self._lock:
            user_id = self._current_user_id
            self._current_user_id = None
            self._is_authenticated = False
            self.events.publish(StoreEvent.SESSION_LOGOUT, {"user_id": user_id})

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def add_user(self, data: UserCreate) -> User:
        user = User(id=_new_id(), created_at=_now(), **data.model_dump())
        return self._insert(self._users, user, StoreEvent.USER_CREATED)

    def update_user(self, user_id: str, updates: UserUpdate) -> None:
        self._update(self._users, user_id, updates, StoreEvent.USER_UPDATED)

    def delete_user(self, user_id: str) -> None:
        self._delete(self._users, user_id, StoreEvent.USER_DELETED)

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    def add_role(self, data: RoleCreate) -> Role:
        role = Role(id=_new_id(), created_at=_now(), **data.model_dump())
        return self._insert(self._roles, role, StoreEvent.ROLE_CREATED)

    def update_role(self, role_id: str, updates: RoleUpdate) -> None:
        self._update(self._roles, role_id, updates, StoreEvent.ROLE_UPDATED)

    def delete_role(self, role_id: str) -> None:
        self._delete(self._roles, role_id, StoreEvent.ROLE_DELETED)

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------

    def add_permission(self, data: PermissionCreate) -> Permission:
        permission = Permission(id=_new_id(), **data.model_dump())
        return self._insert(
            self._permissions, permission, StoreEvent.PERMISSION_CREATED
        )

    def update_permission(self, permission_id: str, updates: PermissionUpdate) -> None:
        self._update(
            self._permissions, permission_id, updates, StoreEvent.PERMISSION_UPDATED
        )

    def delete_permission(self, permission_id: str) -> None:
        self._delete(self._permissions, permission_id, StoreEvent.PERMISSION_DELETED)

    # ------------------------------------------------------------------
    # Teams
    # ------------------------------------------------------------------

    def add_team(self, data: TeamCreate) -> Team:
        team = Team(id=_new_id(), created_at=_now(), **data.model_dump())
        return self._insert(self._teams, team, StoreEvent.TEAM_CREATED)

    def update_team(self, team_id: str, updates: TeamUpdate) -> None:
        self._update(self._teams, team_id, updates, StoreEvent.TEAM_UPDATED)

    def delete_team(self, team_id: str) -> None:
        self._delete(self._teams, team_id, StoreEvent.TEAM_DELETED)

    # ------------------------------------------------------------------
    # Permission resolution
    # ------------------------------------------------------------------

    def get_user_permissions(self, user_id: str) -> list[Permission]:
        """Resolve user -> role -> permissions.

        The result follows the order of the permissions collection, not the
        role's ``permission_ids``. Missing users or roles yield an empty
        list; permission ids that no longer resolve are skipped.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return []

            role = self._roles.get(user.role_id)
            if role is None:
                return []

            granted = set(role.permission_ids)
            return [
                p.model_copy(deep=True)
                for p in self._permissions.values()
                if p.id in granted
            ]

    def has_permission(self, user_id: str, permission_name: str) -> bool:
        """Check whether a user's role grants a permission by name."""
        return any(
            p.name == permission_name for p in self.get_user_permissions(user_id)
        )

    # ------------------------------------------------------------------
    # Snapshot import / export
    # ------------------------------------------------------------------

    def export_snapshot(self) -> StoreSnapshot:
        """Export the four collections. Session state is not included."""
        with self._lock:
            return StoreSnapshot(
                users=self.users,
                roles=self.roles,
                permissions=self.permissions,
                teams=self.teams,
            )

    def import_snapshot(self, snapshot: StoreSnapshot) -> None:
        """Replace all four collections and reset the session."""
        with self._lock:
            self._users = {u.id: u.model_copy(deep=True) for u in snapshot.users}
            self._roles = {r.id: r.model_copy(deep=True) for r in snapshot.roles}
            self._permissions = {
                p.id: p.model_copy(deep=True) for p in snapshot.permissions
            }
            self._teams = {t.id: t.model_copy(deep=True) for t in snapshot.teams}
            self._current_user_id = None
            self._is_authenticated = False
            logger.info(
                f"Imported snapshot: {len(self._users)} users, "
                f"{len(self._roles)} roles, {len(self._permissions)} permissions, "
                f"{len(self._teams)} teams"
            )
            self.events.publish(StoreEvent.STATE_IMPORTED, {})

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _insert(
        self, collection: dict[str, EntityT], entity: EntityT, event: StoreEvent
    ) -> EntityT:
        with self._lock:
            collection[entity.id] = entity
            logger.debug(f"{event.value}: {entity.id}")
            self.events.publish(event, {"id": entity.id})
            return entity.model_copy(deep=True)

    def _update(
        self,
        collection: dict[str, EntityT],
        entity_id: str,
        updates: BaseModel,
        event: StoreEvent,
    ) -> None:
        # Entity fields are never nullable, so an explicit None means "unchanged"
        changes = updates.model_dump(exclude_unset=True, exclude_none=True)

        with self._lock:
            existing = collection.get(entity_id)
            if existing is None or not changes:
                return

            # Deep so no list is shared with the previous version
            collection[entity_id] = existing.model_copy(update=changes, deep=True)
            logger.debug(f"{event.value}: {entity_id} fields={sorted(changes)}")
            self.events.publish(event, {"id": entity_id, "fields": sorted(changes)})

    def _delete(
        self, collection: dict[str, EntityT], entity_id: str, event: StoreEvent
    ) -> None:
        with self._lock:
            if collection.pop(entity_id, None) is None:
                return
            logger.debug(f"{event.value}: {entity_id}")
            self.events.publish(event, {"id": entity_id})
