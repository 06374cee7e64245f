# src/rbac/accounts.py
from .roles import SUPERADMIN_ROLE_ID

SUPERADMIN_USER_ID = "superadmin"

DEFAULT_USERS = [
    {
        "id": SUPERADMIN_USER_ID,
        "email": "superadmin@example.com",
        "name": "Super Administrator",
        "role_id": SUPERADMIN_ROLE_ID,
        "team_ids": [],
        "is_active": True,
    },
]

DEFAULT_TEAMS = [
    {
        "id": "1",
        "name": "Development Team",
        "description": "Software development team",
        "user_ids": [],
    },
    {
        "id": "2",
        "name": "Management Team",
        "description": "Management and leadership team",
        "user_ids": [SUPERADMIN_USER_ID],
    },
]
