"""Pydantic models for auth requests."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import field_validator


class _OptionalFieldsModel(BaseModel):
    """Body model whose absent or non-string fields read as missing."""

    @field_validator("*", mode="before")
    @classmethod
    def non_string_is_missing(cls, value: object) -> object:
        return value if isinstance(value, str) else None


class RegisterRequest(_OptionalFieldsModel):
    """POST /api/auth/register request body."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(_OptionalFieldsModel):
    """POST /api/auth/login request body."""

    email: str | None = None
    password: str | None = None
