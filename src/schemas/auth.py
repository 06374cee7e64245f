# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication and session schemas."""

from pydantic import BaseModel

from src.schemas.rbac import User


class SessionState(BaseModel):
    """Process-wide session: who is logged in, if anyone."""

    current_user: User | None = None
    is_authenticated: bool = False


class LoginRequest(BaseModel):
    """Login request body."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    success: bool
    user: User


class CurrentUserResponse(BaseModel):
    """Current user with the names of their effective permissions."""

    user: User
    permissions: list[str]
