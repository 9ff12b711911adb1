"""Registration form state and the pure reducers that transition it."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import replace
from enum import Enum

from regflow.core.validation import MIN_PASSWORD_LENGTH

FORM_FIELDS = ("name", "email", "password")


class PasswordStrength(str, Enum):
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"


@dataclass(frozen=True, slots=True)
class FormState:
    """Input fields plus the UI flags for one registration attempt."""

    name: str = ""
    email: str = ""
    password: str = ""
    error: str = ""
    success: str = ""
    loading: bool = False


def compute_password_strength(password: str) -> PasswordStrength:
    """Classify a password for the strength hint.

    Not a submission gate: a six character lowercase password is Medium and
    still accepted.
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return PasswordStrength.WEAK
    has_upper = any("A" <= char <= "Z" for char in password)
    has_digit = any("0" <= char <= "9" for char in password)
    has_symbol = any(not (char.isascii() and char.isalnum()) for char in password)
    if has_upper and has_digit and has_symbol:
        return PasswordStrength.STRONG
    return PasswordStrength.MEDIUM


def on_field_change(state: FormState, field: str, value: str) -> FormState:
    """Set one input field and clear any previous error or success message."""
    if field not in FORM_FIELDS:
        raise ValueError(f"unknown form field: {field}")
    return replace(state, **{field: value}, error="", success="")


def submit_started(state: FormState) -> FormState:
    return replace(state, loading=True, error="", success="")


def submit_failed(state: FormState, message: str) -> FormState:
    return replace(state, loading=False, error=message, success="")


def submit_succeeded(state: FormState, message: str) -> FormState:
    """Finish a successful submission and reset the input fields."""
    return FormState(success=message)
