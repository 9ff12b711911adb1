"""FastAPI dependencies for settings and bearer-token authentication."""

from __future__ import annotations

from fastapi import Depends
from fastapi import Header

import regflow.runtime as runtime
from regflow.auth.errors import raise_token_invalid
from regflow.auth.service import me_user
from regflow.core.config import Settings

BEARER_SCHEME = "bearer"


def get_settings() -> Settings:
    """Settings loaded by the most recent startup."""
    return runtime.settings


def bearer_token(authorization: str | None = Header(default=None)) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    scheme, _, token = (authorization or "").partition(" ")
    token = token.strip()
    if scheme.lower() != BEARER_SCHEME or not token:
        raise_token_invalid()
    return token


def require_current_user(
    token: str = Depends(bearer_token),
    settings: Settings = Depends(get_settings),
) -> dict[str, object]:
    """Resolve the bearer token to the profile of a stored user."""
    return me_user(settings=settings, access_token=token)
