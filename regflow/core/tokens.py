"""JWT access token helpers for the login session."""

from __future__ import annotations

from datetime import datetime
from datetime import timedelta
from datetime import timezone
from typing import Any

import jwt

ALGORITHM = "HS256"


class AccessTokenError(ValueError):
    """Base access token error."""


class AccessTokenInvalidError(AccessTokenError):
    """Raised when an access token cannot be decoded or is malformed."""


class AccessTokenExpiredError(AccessTokenError):
    """Raised when an access token is expired."""


def create_access_token(
    *,
    user_id: int,
    secret: str,
    now: datetime,
    expires_in_seconds: int,
) -> str:
    """Create a JWT access token containing sub and exp."""
    exp = int((now + timedelta(seconds=expires_in_seconds)).timestamp())
    payload = {"sub": str(user_id), "exp": exp}
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, *, secret: str, now: datetime) -> dict[str, Any]:
    """Decode an access token and check expiry against the given clock."""
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"verify_exp": False},
        )
    except jwt.InvalidTokenError as exc:
        raise AccessTokenInvalidError("invalid access token") from exc

    exp = payload.get("exp")
    if not isinstance(exp, int):
        raise AccessTokenInvalidError("missing or invalid exp")

    now_ts = int(now.astimezone(timezone.utc).timestamp())
    if now_ts >= exp:
        raise AccessTokenExpiredError("access token expired")

    return payload
