"""Form controller sequencing the register-then-login calls."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

import httpx

from regflow.client.form import FormState
from regflow.client.form import PasswordStrength
from regflow.client.form import compute_password_strength
from regflow.client.form import on_field_change
from regflow.client.form import submit_failed
from regflow.client.form import submit_started
from regflow.client.form import submit_succeeded
from regflow.client.storage import TOKEN_KEY
from regflow.client.storage import TokenStorage
from regflow.core.validation import RegistrationValidationError
from regflow.core.validation import validate_registration

logger = logging.getLogger(__name__)

REGISTER_PATH = "/api/auth/register"
LOGIN_PATH = "/api/auth/login"

REGISTER_FALLBACK = "Registration failed"
LOGIN_FALLBACK = "Login failed"
NETWORK_ERROR = "Network error"
STORAGE_ERROR = "Could not store session token"
SUCCESS_MESSAGE = "Registration successful! Logged in."


class RegistrationFailedError(Exception):
    """A register or login call did not succeed; the message is user-facing."""


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    message = body.get("message") if isinstance(body, dict) else None
    return message if isinstance(message, str) and message else fallback


class RegistrationFormController:
    """Owns one FormState and drives a single registration attempt per submit.

    ``http`` is any ``httpx.Client`` whose base URL points at the service;
    the controller never retries. Register is not idempotent (a repeat gets
    409), so after a register success followed by a login failure the caller
    should retry login alone.
    """

    def __init__(self, *, http: httpx.Client, storage: TokenStorage) -> None:
        self._http = http
        self._storage = storage
        self.state = FormState()

    @property
    def password_strength(self) -> PasswordStrength:
        return compute_password_strength(self.state.password)

    def on_field_change(self, field: str, value: str) -> None:
        self.state = on_field_change(self.state, field, value)

    def submit(self) -> FormState:
        """Validate, register, log in and store the token; returns the final state."""
        state = self.state
        try:
            validate_registration(state.name, state.email, state.password)
        except RegistrationValidationError as exc:
            self.state = submit_failed(state, exc.message)
            return self.state

        self.state = submit_started(state)
        try:
            self._post(
                REGISTER_PATH,
                {"name": state.name, "email": state.email, "password": state.password},
                fallback=REGISTER_FALLBACK,
            )
            login_body = self._post(
                LOGIN_PATH,
                {"email": state.email, "password": state.password},
                fallback=LOGIN_FALLBACK,
            )
            token = login_body.get("token")
            if not isinstance(token, str) or not token:
                raise RegistrationFailedError(LOGIN_FALLBACK)
            try:
                self._storage.set(TOKEN_KEY, token)
            except (OSError, ValueError) as exc:
                logger.warning("could not store session token: %s", exc)
                raise RegistrationFailedError(STORAGE_ERROR) from exc
        except RegistrationFailedError as exc:
            self.state = submit_failed(self.state, str(exc))
            return self.state
        finally:
            if self.state.loading:
                self.state = replace(self.state, loading=False)

        self.state = submit_succeeded(self.state, SUCCESS_MESSAGE)
        return self.state

    def _post(self, path: str, body: dict[str, str], *, fallback: str) -> dict[str, Any]:
        try:
            response = self._http.post(path, json=body)
        except httpx.HTTPError as exc:
            logger.warning("POST %s failed: %s", path, exc)
            raise RegistrationFailedError(NETWORK_ERROR) from exc

        if not response.is_success:
            raise RegistrationFailedError(_error_message(response, fallback))
        try:
            payload = response.json()
        except ValueError as exc:
            raise RegistrationFailedError(fallback) from exc
        return payload if isinstance(payload, dict) else {}
