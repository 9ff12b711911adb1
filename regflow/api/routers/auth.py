"""Auth REST routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi import Depends

from regflow.api.deps import get_settings
from regflow.api.deps import require_current_user
from regflow.auth.models import LoginRequest
from regflow.auth.models import RegisterRequest
from regflow.auth.service import login_user
from regflow.auth.service import register_user
from regflow.core.config import Settings

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", status_code=201)
def register(payload: RegisterRequest, settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Validate, hash and store a new user."""
    return register_user(settings=settings, payload=payload)


@router.post("/login")
def login(payload: LoginRequest, settings: Settings = Depends(get_settings)) -> dict[str, object]:
    """Authenticate by email/password and issue a session token."""
    return login_user(settings=settings, payload=payload)


@router.get("/me")
def me(user: dict[str, object] = Depends(require_current_user)) -> dict[str, object]:
    """Profile of the user the bearer token was issued to."""
    return user
