# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization entities and their create/update schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.models.enums import PermissionAction, PermissionResource


class Permission(BaseModel):
    """An atomic, named capability tied to a (resource, action) pair."""

    id: str
    name: str
    description: str
    resource: str
    action: str


class Role(BaseModel):
    """A named bundle of permission ids.

    ``permission_ids`` holds weak references: ids that no longer resolve are
    kept and skipped during resolution.
    """

    id: str
    name: str
    description: str
    permission_ids: list[str] = []
    created_at: datetime


class User(BaseModel):
    """A user with exactly one role and any number of teams."""

    id: str
    email: str
    name: str
    role_id: str
    team_ids: list[str] = []
    created_at: datetime
    is_active: bool = True


class Team(BaseModel):
    """A named grouping of users with no bearing on authorization."""

    id: str
    name: str
    description: str
    user_ids: list[str] = []
    created_at: datetime


class PermissionCreate(BaseModel):
    """Schema for creating a permission."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    resource: PermissionResource
    action: PermissionAction


class PermissionUpdate(BaseModel):
    """Schema for updating a permission."""

    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    resource: PermissionResource | None = None
    action: PermissionAction | None = None


class RoleCreate(BaseModel):
    """Schema for creating a role."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    permission_ids: list[str] = []


class RoleUpdate(BaseModel):
    """Schema for updating a role."""

    name: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    permission_ids: list[str] | None = None


class UserCreate(BaseModel):
    """Schema for creating a user."""

    email: EmailStr
    name: str = Field(..., min_length=1)
    role_id: str = Field(..., min_length=1)
    team_ids: list[str] = []
    is_active: bool = True


class UserUpdate(BaseModel):
    """Schema for updating a user."""

    email: EmailStr | None = None
    name: str | None = Field(None, min_length=1)
    role_id: str | None = Field(None, min_length=1)
    team_ids: list[str] | None = None
    is_active: bool | None = None


class TeamCreate(BaseModel):
    """Schema for creating a team."""

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    user_ids: list[str] = []


class TeamUpdate(BaseModel):
    """Schema for updating a team."""

    name: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    user_ids: list[str] | None = None


class StoreSnapshot(BaseModel):
    """Whole-state export of the four collections (no session state)."""

    users: list[User] = []
    roles: list[Role] = []
    permissions: list[Permission] = []
    teams: list[Team] = []


class RoleWithPermissions(Role):
    """Role response including resolved permissions and assignment count."""

    permissions: list[Permission]
    user_count: int


class TeamWithMembers(Team):
    """Team response including the users that still resolve."""

    members: list[User]


class PermissionWithRoles(Permission):
    """Permission response including the roles that reference it."""

    role_ids: list[str]


class UserPage(BaseModel):
    """A page of users."""

    items: list[User]
    total: int
    page: int
    per_page: int
    total_pages: int
