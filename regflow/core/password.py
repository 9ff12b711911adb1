"""Password hashing helpers for auth services."""

from __future__ import annotations

from functools import lru_cache

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from regflow.core.config import DEFAULT_BCRYPT_ROUNDS


@lru_cache(maxsize=None)
def _password_context(rounds: int) -> CryptContext:
    # Verification reads the cost from the stored hash, so any context verifies.
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(plain_password: str, *, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash plaintext password with a salted bcrypt digest."""
    return _password_context(rounds).hash(plain_password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Verify plaintext password against a stored bcrypt hash."""
    try:
        return _password_context(DEFAULT_BCRYPT_ROUNDS).verify(plain_password, password_hash)
    except (UnknownHashError, ValueError):
        return False
