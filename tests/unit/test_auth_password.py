"""Password hashing contract tests."""

from __future__ import annotations

from regflow.core.password import hash_password
from regflow.core.password import verify_password


def test_hash_is_salted_and_not_plaintext() -> None:
    """Input: same plaintext twice -> Output: two different non-plaintext hashes."""
    first = hash_password("Secret1!", rounds=4)
    second = hash_password("Secret1!", rounds=4)

    assert first != "Secret1!"
    assert first != second


def test_hash_encodes_requested_cost_factor() -> None:
    """Input: rounds=5 -> Output: bcrypt hash carries cost 05."""
    hashed = hash_password("Secret1!", rounds=5)
    assert hashed.split("$")[2] == "05"


def test_verify_matches_original_password() -> None:
    """Input: correct plaintext with its hash -> Output: verify True."""
    hashed = hash_password("Secret1!", rounds=4)
    assert verify_password("Secret1!", hashed) is True


def test_verify_rejects_wrong_password() -> None:
    """Input: wrong plaintext with hash -> Output: verify False."""
    hashed = hash_password("Secret1!", rounds=4)
    assert verify_password("wrong", hashed) is False


def test_verify_rejects_unknown_hash_format() -> None:
    """Input: stored value that is not a bcrypt hash -> Output: verify False."""
    assert verify_password("Secret1!", "Secret1!") is False
