"""HTTP Basic authentication for the Vendor Smart API.

A single principal is configured through ``AUTH_USERNAME`` / ``AUTH_PASSWORD``.
Credentials are compared in constant time; any mismatch or a missing
``Authorization`` header yields a 401 with ``WWW-Authenticate: Basic``.
"""

import logging
import secrets

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from vendor_smart.core.config import Settings
from vendor_smart.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

security = HTTPBasic(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_basic_auth(
    credentials: HTTPBasicCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency returning the authenticated username."""
    if credentials is None:
        raise UnauthorizedError()

    user_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), settings.auth_username.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), settings.auth_password.encode("utf-8")
    )
    if not (user_ok and password_ok):
        logger.warning("Rejected credentials for user '%s'", credentials.username)
        raise UnauthorizedError("Invalid credentials")
    return credentials.username
