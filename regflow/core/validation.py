"""Registration input rules shared by the form controller and the server."""

from __future__ import annotations

import unicodedata

import regex

MIN_PASSWORD_LENGTH = 6
MAX_NAME_GRAPHEMES = 64
_GRAPHEME_PATTERN = regex.compile(r"\X")

FIELDS_REQUIRED = "FIELDS_REQUIRED"
EMAIL_INVALID = "EMAIL_INVALID"
PASSWORD_TOO_SHORT = "PASSWORD_TOO_SHORT"
NAME_TOO_LONG = "NAME_TOO_LONG"

MESSAGES = {
    FIELDS_REQUIRED: "All fields are required",
    EMAIL_INVALID: "Invalid email address",
    PASSWORD_TOO_SHORT: f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
    NAME_TOO_LONG: f"Name must be at most {MAX_NAME_GRAPHEMES} characters",
}


class RegistrationValidationError(ValueError):
    """Raised when registration input violates one of the shared rules."""

    def __init__(self, code: str) -> None:
        super().__init__(MESSAGES[code])
        self.code = code
        self.message = MESSAGES[code]


def normalize_name(raw_name: str) -> str:
    """Trim and normalize a display name to NFC form."""
    return unicodedata.normalize("NFC", raw_name.strip())


def count_graphemes(value: str) -> int:
    """Count user-visible characters using grapheme clusters."""
    return len(_GRAPHEME_PATTERN.findall(value))


def require_fields(*values: str | None) -> None:
    """Reject the input when any value is missing or empty."""
    if any(not value for value in values):
        raise RegistrationValidationError(FIELDS_REQUIRED)


def validate_registration(name: str | None, email: str | None, password: str | None) -> None:
    """Check registration input against the shared rules, first failure wins.

    The checks are necessary rather than sufficient: ``a@`` is accepted as an
    email and a six character password passes regardless of its strength.
    """
    require_fields(name, email, password)
    normalized_name = normalize_name(name or "")
    require_fields(normalized_name)

    if "@" not in (email or ""):
        raise RegistrationValidationError(EMAIL_INVALID)
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise RegistrationValidationError(PASSWORD_TOO_SHORT)
    if count_graphemes(normalized_name) > MAX_NAME_GRAPHEMES:
        raise RegistrationValidationError(NAME_TOO_LONG)
