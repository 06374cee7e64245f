# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for permissions."""

from enum import Enum


class PermissionResource(str, Enum):
    """Resources a permission can be tied to."""

    USERS = "users"
    ROLES = "roles"
    PERMISSIONS = "permissions"
    TEAMS = "teams"


class PermissionAction(str, Enum):
    """Actions a permission can grant on a resource."""

    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    MANAGE = "manage"
