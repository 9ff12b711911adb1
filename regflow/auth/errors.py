"""Auth-specific HTTP error helpers."""

from __future__ import annotations

from typing import NoReturn

from fastapi import HTTPException

from regflow.auth.http import INTERNAL_ERROR_MESSAGE
from regflow.auth.http import api_error
from regflow.core.validation import RegistrationValidationError


def raise_validation_error(exc: RegistrationValidationError) -> NoReturn:
    """Raise a unified input validation error."""
    raise HTTPException(
        status_code=400,
        detail=api_error(code="VALIDATION_ERROR", message=exc.message, detail={"reason": exc.code}),
    ) from exc


def raise_email_conflict(exc: Exception | None = None) -> NoReturn:
    """Raise unified email-conflict response."""
    raise HTTPException(
        status_code=409,
        detail=api_error(
            code="AUTH_EMAIL_CONFLICT",
            message="User already exists",
            detail={},
        ),
    ) from exc


def raise_invalid_credentials() -> NoReturn:
    """Raise unified invalid-credentials response."""
    raise HTTPException(
        status_code=401,
        detail=api_error(
            code="AUTH_INVALID_CREDENTIALS",
            message="Invalid email or password",
            detail={},
        ),
    )


def raise_token_invalid() -> NoReturn:
    """Raise unified invalid-token response."""
    raise HTTPException(
        status_code=401,
        detail=api_error(
            code="AUTH_TOKEN_INVALID",
            message="Invalid access token",
            detail={},
        ),
        headers={"WWW-Authenticate": "Bearer"},
    )


def raise_token_expired() -> NoReturn:
    """Raise unified expired-token response."""
    raise HTTPException(
        status_code=401,
        detail=api_error(
            code="AUTH_TOKEN_EXPIRED",
            message="Access token expired",
            detail={},
        ),
        headers={"WWW-Authenticate": "Bearer"},
    )


def raise_internal_error(exc: Exception) -> NoReturn:
    """Collapse an unexpected failure into the generic 500 response."""
    raise HTTPException(
        status_code=500,
        detail=api_error(
            code="INTERNAL_ERROR",
            message=INTERNAL_ERROR_MESSAGE,
            detail={},
        ),
    ) from exc
