# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role management API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_store, require_permission
from src.schemas.rbac import Role, RoleCreate, RoleUpdate, RoleWithPermissions, User
from src.services import rbac_service
from src.store import AuthorizationStore

router = APIRouter()


def build_role_response(store: AuthorizationStore, role: Role) -> RoleWithPermissions:
    """Build a role response with resolved permissions and user count."""
    return RoleWithPermissions(
        **role.model_dump(),
        permissions=rbac_service.role_permissions(store, role),
        user_count=rbac_service.count_users_with_role(store, role.id),
    )


def _get_role_or_404(store: AuthorizationStore, role_id: str) -> Role:
    role = store.get_role(role_id)
    if role is None:
        raise HTTPException(status_code=404, detail="Role not found")
    return role


@router.get("/roles", response_model=list[RoleWithPermissions], summary="List roles")
def list_roles(
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_roles")),
) -> list[RoleWithPermissions]:
    """Requires view_roles permission."""
    return [build_role_response(store, role) for role in store.roles]


@router.post(
    "/roles",
    response_model=RoleWithPermissions,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new role",
)
def create_role(
    role_in: RoleCreate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("create_roles")),
) -> RoleWithPermissions:
    """Create a role. Permission ids are stored as given, even unknown ones.

    Requires create_roles permission.
    """
    role = store.add_role(role_in)
    return build_role_response(store, role)


@router.get(
    "/roles/{role_id}", response_model=RoleWithPermissions, summary="Get a role"
)
def get_role(
    role_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("view_roles")),
) -> RoleWithPermissions:
    return build_role_response(store, _get_role_or_404(store, role_id))


@router.put(
    "/roles/{role_id}", response_model=RoleWithPermissions, summary="Update a role"
)
def update_role(
    role_id: str,
    role_in: RoleUpdate,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("edit_roles")),
) -> RoleWithPermissions:
    """Requires edit_roles permission."""
    _get_role_or_404(store, role_id)
    store.update_role(role_id, role_in)
    return build_role_response(store, store.get_role(role_id))


@router.delete(
    "/roles/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a role",
)
def delete_role(
    role_id: str,
    store: AuthorizationStore = Depends(get_store),
    current_user: User = Depends(require_permission("delete_roles")),
) -> None:
    """Delete a role. The superadmin role cannot be deleted.

    Users assigned to a deleted role keep its id and resolve to no
    permissions. Requires delete_roles permission.
    """
    _get_role_or_404(store, role_id)
    if not rbac_service.can_delete_role(role_id):
        raise HTTPException(
            status_code=403, detail="The superadmin role cannot be deleted"
        )
    store.delete_role(role_id)
