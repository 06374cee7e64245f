# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import (
    auth,
    permissions,
    roles,
    teams,
    users,
)

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# User management routes
api_router.include_router(users.router, tags=["users"])

# Role routes
api_router.include_router(roles.router, tags=["roles"])

# Permission routes
api_router.include_router(permissions.router, tags=["permissions"])

# Team routes
api_router.include_router(teams.router, tags=["teams"])
