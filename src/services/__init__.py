"""Services package."""
from src.services import (
    auth_service,
    rbac_seed_service,
    rbac_service,
)

__all__ = [
    "auth_service",
    "rbac_seed_service",
    "rbac_service",
]
