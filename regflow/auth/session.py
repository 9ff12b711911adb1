"""Session token issuance for the login endpoint."""

from __future__ import annotations

from datetime import datetime
from datetime import timezone

from regflow.auth.repository import UserRecord
from regflow.core.config import Settings
from regflow.core.tokens import create_access_token


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_utc_iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def issue_session(*, settings: Settings, user: UserRecord, now: datetime | None = None) -> dict[str, object]:
    """Sign a bearer token for the user and build the login response."""
    token = create_access_token(
        user_id=user.id,
        secret=settings.regflow_jwt_secret,
        now=now or utc_now(),
        expires_in_seconds=settings.regflow_access_token_expire_seconds,
    )
    return {
        "token": token,
        "expires_in": settings.regflow_access_token_expire_seconds,
        "user": user.profile(),
    }
