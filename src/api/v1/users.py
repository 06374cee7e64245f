# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.deps import get_store, require_permission
from src.schemas.rbac import Permission, User, UserCreate, UserPage, UserUpdate
from src.services import rbac_service
from src.store import AuthorizationStore

router = APIRouter()


def _get_user_or_404(store: AuthorizationStore, user_id: str) -> User:
    user = store.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/users", response_model=UserPage, summary="List users")
def list_users(
    q: str | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=100),
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_users")),
) -> UserPage:
    """Search and page through users.

    Requires view_users permission.
    """
    result = rbac_service.paginate(
        rbac_service.search_users(store, q), page, per_page
    )
    return UserPage(
        items=result.items,
        total=result.total,
        page=result.page,
        per_page=result.per_page,
        total_pages=result.total_pages,
    )


@router.post(
    "/users",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
def create_user(
    user_in: UserCreate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("create_users")),
) -> User:
    """Create a new user.

    Requires create_users permission.
    """
    return store.add_user(user_in)


@router.get("/users/{user_id}", response_model=User, summary="Get a user")
def get_user(
    user_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_users")),
) -> User:
    return _get_user_or_404(store, user_id)


@router.get(
    "/users/{user_id}/permissions",
    response_model=list[Permission],
    summary="Get a user's effective permissions",
)
def get_user_permissions(
    user_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_users")),
) -> list[Permission]:
    """Resolve the permissions granted to a user through their role.

    Requires view_users permission.
    """
    _get_user_or_404(store, user_id)
    return store.get_user_permissions(user_id)


@router.put("/users/{user_id}", response_model=User, summary="Update a user")
def update_user(
    user_id: str,
    user_in: UserUpdate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("edit_users")),
) -> User:
    """Update the fields given in the request body.

    Requires edit_users permission.
    """
    _get_user_or_404(store, user_id)
    store.update_user(user_id, user_in)
    return store.get_user(user_id)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    user_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("delete_users")),
) -> None:
    """Delete a user. Team memberships referencing the user are kept.

    Requires delete_users permission.
    """
    _get_user_or_404(store, user_id)
    store.delete_user(user_id)
