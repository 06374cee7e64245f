# src/rbac/roles.py
from .permissions import CORE_PERMISSIONS

SUPERADMIN_ROLE_ID = "superadmin"

# Super Admin gets every permission that exists at seed time
SUPERADMIN_PERMISSION_IDS = [p["id"] for p in CORE_PERMISSIONS]

# Default roles to seed on first run
# Only Super Admin is protected from deletion, and only by the API layer;
# the store itself lets any role be deleted
DEFAULT_ROLES = [
    {
        "id": SUPERADMIN_ROLE_ID,
        "name": "Super Admin",
        "description": "Full system access",
        "permission_ids": SUPERADMIN_PERMISSION_IDS,
    },
    {
        "id": "admin",
        "name": "Admin",
        "description": "Administrative access",
        "permission_ids": ["1", "2", "3", "5", "6", "7", "9", "10", "11"],
    },
    {
        "id": "user",
        "name": "User",
        "description": "Basic user access",
        "permission_ids": ["1", "5", "9"],
    },
]
