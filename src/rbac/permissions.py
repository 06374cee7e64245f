# src/rbac/permissions.py
# Fixed ids: roles reference these by id, not by name.
CORE_PERMISSIONS = [
    # User management
    {
        "id": "1",
        "name": "view_users",
        "description": "View users",
        "resource": "users",
        "action": "view",
    },
    {
        "id": "2",
        "name": "create_users",
        "description": "Create users",
        "resource": "users",
        "action": "create",
    },
    {
        "id": "3",
        "name": "edit_users",
        "description": "Edit users",
        "resource": "users",
        "action": "edit",
    },
    {
        "id": "4",
        "name": "delete_users",
        "description": "Delete users",
        "resource": "users",
        "action": "delete",
    },
    # Role management
    {
        "id": "5",
        "name": "view_roles",
        "description": "View roles",
        "resource": "roles",
        "action": "view",
    },
    {
        "id": "6",
        "name": "create_roles",
        "description": "Create roles",
        "resource": "roles",
        "action": "create",
    },
    {
        "id": "7",
        "name": "edit_roles",
        "description": "Edit roles",
        "resource": "roles",
        "action": "edit",
    },
    {
        "id": "8",
        "name": "delete_roles",
        "description": "Delete roles",
        "resource": "roles",
        "action": "delete",
    },
    # Team management
    {
        "id": "9",
        "name": "view_teams",
        "description": "View teams",
        "resource": "teams",
        "action": "view",
    },
    {
        "id": "10",
        "name": "create_teams",
        "description": "Create teams",
        "resource": "teams",
        "action": "create",
    },
    {
        "id": "11",
        "name": "edit_teams",
        "description": "Edit teams",
        "resource": "teams",
        "action": "edit",
    },
    {
        "id": "12",
        "name": "delete_teams",
        "description": "Delete teams",
        "resource": "teams",
        "action": "delete",
    },
    # Permission management
    {
        "id": "13",
        "name": "view_permissions",
        "description": "View permissions",
        "resource": "permissions",
        "action": "view",
    },
    {
        "id": "14",
        "name": "manage_permissions",
        "description": "Manage permissions",
        "resource": "permissions",
        "action": "manage",
    },
]
