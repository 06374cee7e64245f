# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_current_user, get_store
from src.schemas.auth import CurrentUserResponse, LoginRequest, LoginResponse
from src.schemas.rbac import User
from src.store import AuthorizationStore

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    store: AuthorizationStore = Depends(get_store),
) -> LoginResponse:
    """Log in with email and password."""
    if not store.login(data.email, data.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    return LoginResponse(success=True, user=store.current_user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(store: AuthorizationStore = Depends(get_store)) -> None:
    """Log out the current session."""
    store.logout()


@router.get("/me", response_model=CurrentUserResponse)
def get_me(
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(get_current_user),
) -> CurrentUserResponse:
    """Get the current user and the names of their permissions."""
    return CurrentUserResponse(
        user=current_user,
        permissions=[p.name for p in store.get_user_permissions(current_user.id)],
    )
