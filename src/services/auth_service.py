# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service.

Only a stand-in credential comparison lives here. Password storage and
hashing are out of scope; the single accepted pair comes from settings.
"""

import secrets

from src.config import Settings, settings as default_settings


def verify_credentials(
    email: str, password: str, config: Settings | None = None
) -> bool:
    """Check an email/password pair against the configured login pair."""
    config = config or default_settings
    email_ok = secrets.compare_digest(email.encode(), config.login_email.encode())
    password_ok = secrets.compare_digest(
        password.encode(), config.login_password.encode()
    )
    return email_ok and password_ok
