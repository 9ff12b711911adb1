"""Auth business logic for register/login."""

from __future__ import annotations

import logging
import sqlite3

from regflow.auth.errors import raise_email_conflict
from regflow.auth.errors import raise_internal_error
from regflow.auth.errors import raise_invalid_credentials
from regflow.auth.errors import raise_token_expired
from regflow.auth.errors import raise_token_invalid
from regflow.auth.errors import raise_validation_error
from regflow.auth.models import LoginRequest
from regflow.auth.models import RegisterRequest
from regflow.auth.repository import NewUser
from regflow.auth.repository import find_one
from regflow.auth.repository import get_user_by_id
from regflow.auth.repository import insert_one
from regflow.auth.schema import init_auth_schema
from regflow.auth.session import issue_session
from regflow.auth.session import to_utc_iso
from regflow.auth.session import utc_now
from regflow.core.config import Settings
from regflow.core.password import hash_password
from regflow.core.password import verify_password
from regflow.core.tokens import AccessTokenExpiredError
from regflow.core.tokens import AccessTokenInvalidError
from regflow.core.tokens import decode_access_token
from regflow.core.validation import RegistrationValidationError
from regflow.core.validation import normalize_name
from regflow.core.validation import require_fields
from regflow.core.validation import validate_registration

logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "User registered successfully"


def startup_auth_schema(settings: Settings) -> None:
    """Ensure the users table exists before handling traffic."""
    init_auth_schema(settings)


def register_user(*, settings: Settings, payload: RegisterRequest) -> dict[str, str]:
    """Validate, hash and persist a new user.

    The pre-insert lookup only spares the bcrypt cost for a known duplicate;
    the UNIQUE constraint on email decides concurrent registrations.
    """
    try:
        validate_registration(payload.name, payload.email, payload.password)
    except RegistrationValidationError as exc:
        logger.info("register rejected: %s", exc.code)
        raise_validation_error(exc)

    name = normalize_name(payload.name or "")
    email = payload.email or ""
    password = payload.password or ""

    try:
        existing = find_one(settings=settings, email=email)
        if existing is None:
            password_hash = hash_password(password, rounds=settings.regflow_bcrypt_rounds)
            user_id = insert_one(
                settings=settings,
                user=NewUser(
                    name=name,
                    email=email,
                    password_hash=password_hash,
                    created_at=to_utc_iso(utc_now()),
                ),
            )
    except sqlite3.IntegrityError as exc:
        logger.info("register conflict on email constraint")
        raise_email_conflict(exc)
    except Exception as exc:
        logger.exception("register failed while persisting user")
        raise_internal_error(exc)

    if existing is not None:
        logger.info("register conflict for existing email")
        raise_email_conflict()

    logger.info("registered user id=%s", user_id)
    return {"message": REGISTERED_MESSAGE}


def login_user(*, settings: Settings, payload: LoginRequest) -> dict[str, object]:
    """Authenticate by email/password and issue a session token."""
    try:
        require_fields(payload.email, payload.password)
    except RegistrationValidationError as exc:
        raise_validation_error(exc)

    try:
        user = find_one(settings=settings, email=payload.email or "")
    except sqlite3.Error as exc:
        logger.exception("login failed while reading user")
        raise_internal_error(exc)

    if user is None or not verify_password(payload.password or "", user.password_hash):
        logger.warning("login rejected: invalid credentials")
        raise_invalid_credentials()

    return issue_session(settings=settings, user=user)


def me_user(*, settings: Settings, access_token: str) -> dict[str, object]:
    """Return current user profile for a valid access token."""
    try:
        payload = decode_access_token(
            access_token,
            secret=settings.regflow_jwt_secret,
            now=utc_now(),
        )
    except AccessTokenExpiredError:
        raise_token_expired()
    except AccessTokenInvalidError:
        raise_token_invalid()

    try:
        user_id = int(str(payload.get("sub")))
    except (TypeError, ValueError):
        raise_token_invalid()

    user = get_user_by_id(settings=settings, user_id=user_id)
    if user is None:
        raise_token_invalid()

    return user.profile()
