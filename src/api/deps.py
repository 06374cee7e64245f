# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status

from src.schemas.rbac import User
from src.store import AuthorizationStore


def get_store(request: Request) -> AuthorizationStore:
    """Get the authorization store owned by the application."""
    return request.app.state.store


def get_current_user(store: AuthorizationStore = Depends(get_store)) -> User:
    """Get the user of the current session."""
    if not store.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    user = store.current_user
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    return user


def require_permission(permission_name: str) -> Callable[..., User]:
    """Dependency for permission-based authorization."""

    def dependency(
        store: AuthorizationStore = Depends(get_store),
        current_user: User = Depends(get_current_user),
    ) -> User:
        if not store.has_permission(current_user.id, permission_name):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {permission_name}",
            )
        return current_user

    return dependency
