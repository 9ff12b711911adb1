"""Form state reducer and password strength tests."""

from __future__ import annotations

import pytest

from regflow.client.form import FormState
from regflow.client.form import PasswordStrength
from regflow.client.form import compute_password_strength
from regflow.client.form import on_field_change
from regflow.client.form import submit_failed
from regflow.client.form import submit_started
from regflow.client.form import submit_succeeded


@pytest.mark.parametrize("password", ["", "a", "Ab1!", "Ab1!x"])
def test_short_passwords_are_weak(password: str) -> None:
    """Input: length < 6, regardless of complexity -> Output: Weak."""
    assert compute_password_strength(password) is PasswordStrength.WEAK


@pytest.mark.parametrize("password", ["Secret1!", "ABCDE1 ", "aaaaA1-", "Zz9_zzzz", "Ab1\u00e9efg"])
def test_upper_digit_symbol_is_strong(password: str) -> None:
    """Input: length >= 6 with uppercase, digit and symbol -> Output: Strong."""
    assert compute_password_strength(password) is PasswordStrength.STRONG


@pytest.mark.parametrize("password", ["abcdef", "Secret12", "secret1!", "SECRET!!", "abcDEF"])
def test_partial_complexity_is_medium(password: str) -> None:
    """Input: length >= 6 missing one class -> Output: Medium."""
    assert compute_password_strength(password) is PasswordStrength.MEDIUM


def test_strength_labels_match_hint_text() -> None:
    assert [strength.value for strength in PasswordStrength] == ["Weak", "Medium", "Strong"]


def test_field_change_sets_value_and_clears_messages() -> None:
    state = FormState(name="Ann", error="Invalid email address", success="done")

    updated = on_field_change(state, "email", "ann@x.com")

    assert updated.email == "ann@x.com"
    assert updated.name == "Ann"
    assert updated.error == ""
    assert updated.success == ""
    assert state.error == "Invalid email address"


def test_field_change_rejects_unknown_field() -> None:
    with pytest.raises(ValueError):
        on_field_change(FormState(), "loading", "yes")


def test_submit_transitions_toggle_loading() -> None:
    started = submit_started(FormState(name="Ann", email="ann@x.com", password="Secret1!"))
    assert started.loading is True

    failed = submit_failed(started, "User already exists")
    assert failed.loading is False
    assert failed.error == "User already exists"
    assert failed.email == "ann@x.com"


def test_submit_succeeded_resets_fields() -> None:
    started = submit_started(FormState(name="Ann", email="ann@x.com", password="Secret1!"))

    done = submit_succeeded(started, "Registration successful! Logged in.")

    assert done == FormState(success="Registration successful! Logged in.")
