# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission management API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_store, require_permission
from src.schemas.rbac import (
    Permission,
    PermissionCreate,
    PermissionUpdate,
    PermissionWithRoles,
    User,
)
from src.services import rbac_service
from src.store import AuthorizationStore

router = APIRouter()


def build_permission_response(
    store: AuthorizationStore, permission: Permission
) -> PermissionWithRoles:
    roles = rbac_service.roles_with_permission(store, permission.id)
    return PermissionWithRoles(
        **permission.model_dump(), role_ids=[r.id for r in roles]
    )


def _get_permission_or_404(store: AuthorizationStore, permission_id: str) -> Permission:
    permission = store.get_permission(permission_id)
    if permission is None:
        raise HTTPException(status_code=404, detail="Permission not found")
    return permission


@router.get(
    "/permissions",
    response_model=list[PermissionWithRoles],
    summary="List all permissions",
)
def list_permissions(
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_permissions")),
) -> list[PermissionWithRoles]:
    """Requires view_permissions permission."""
    return [build_permission_response(store, p) for p in store.permissions]


@router.get(
    "/permissions/grouped",
    response_model=dict[str, list[PermissionWithRoles]],
    summary="List permissions grouped by resource",
)
def list_permissions_grouped(
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_permissions")),
) -> dict[str, list[PermissionWithRoles]]:
    """Requires view_permissions permission."""
    grouped = rbac_service.group_permissions_by_resource(store.permissions)
    return {
        resource: [build_permission_response(store, p) for p in permissions]
        for resource, permissions in grouped.items()
    }


@router.post(
    "/permissions",
    response_model=PermissionWithRoles,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new permission",
)
def create_permission(
    permission_in: PermissionCreate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("manage_permissions")),
) -> PermissionWithRoles:
    """Requires manage_permissions permission."""
    permission = store.add_permission(permission_in)
    return build_permission_response(store, permission)


@router.get(
    "/permissions/{permission_id}",
    response_model=PermissionWithRoles,
    summary="Get a permission",
)
def get_permission(
    permission_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_permissions")),
) -> PermissionWithRoles:
    return build_permission_response(
        store, _get_permission_or_404(store, permission_id)
    )


@router.put(
    "/permissions/{permission_id}",
    response_model=PermissionWithRoles,
    summary="Update a permission",
)
def update_permission(
    permission_id: str,
    permission_in: PermissionUpdate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("manage_permissions")),
) -> PermissionWithRoles:
    """Requires manage_permissions permission."""
    _get_permission_or_404(store, permission_id)
    store.update_permission(permission_id, permission_in)
    return build_permission_response(store, store.get_permission(permission_id))


@router.delete(
    "/permissions/{permission_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a permission",
)
def delete_permission(
    permission_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("manage_permissions")),
) -> None:
    """Delete a permission.

    Roles keep the id in their permission list; it simply stops resolving.
    Requires manage_permissions permission.
    """
    _get_permission_or_404(store, permission_id)
    store.delete_permission(permission_id)
