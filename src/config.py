# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from the environment or a local .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "RBAC Admin"
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:5173"

    # Snapshot persistence
    database_url: str = "sqlite:///./rbac_admin.db"
    persist_state: bool = True
    snapshot_key: str = "auth-store"

    # Stand-in credential pair accepted by login
    login_email: str = "superadmin@example.com"
    login_password: str = "test123"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
