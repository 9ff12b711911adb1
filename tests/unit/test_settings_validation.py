"""Configuration guard tests."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from regflow.core.config import Settings

SECRET = "unit-test-secret-key-32-bytes-minimum"


def test_defaults_keep_bcrypt_cost_at_twelve(monkeypatch: pytest.MonkeyPatch) -> None:
    """Input: no overrides -> Output: 12 bcrypt rounds and INFO logging."""
    monkeypatch.delenv("REGFLOW_BCRYPT_ROUNDS", raising=False)
    monkeypatch.delenv("REGFLOW_LOG_LEVEL", raising=False)
    settings = Settings(regflow_jwt_secret=SECRET)

    assert settings.regflow_bcrypt_rounds == 12
    assert settings.regflow_log_level == "INFO"


def test_jwt_secret_requires_minimum_32_bytes() -> None:
    """Input: secret shorter than 32 bytes -> Output: settings validation fails."""
    with pytest.raises(ValidationError):
        Settings(regflow_jwt_secret="1234567890123456789012345678901")


@pytest.mark.parametrize("rounds", [3, 32])
def test_bcrypt_rounds_out_of_range_is_rejected(rounds: int) -> None:
    """Input: cost factor outside 4..31 -> Output: settings validation fails."""
    with pytest.raises(ValidationError):
        Settings(regflow_jwt_secret=SECRET, regflow_bcrypt_rounds=rounds)


def test_log_level_is_normalized_and_checked() -> None:
    """Input: lowercase level / unknown level -> Output: upper-cased / rejected."""
    assert Settings(regflow_jwt_secret=SECRET, regflow_log_level="debug").regflow_log_level == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(regflow_jwt_secret=SECRET, regflow_log_level="chatty")


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Input: REGFLOW_* env vars -> Output: values picked up without kwargs."""
    monkeypatch.setenv("REGFLOW_JWT_SECRET", SECRET)
    monkeypatch.setenv("REGFLOW_SQLITE_PATH", "/tmp/users.db")
    monkeypatch.setenv("REGFLOW_CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")

    settings = Settings()

    assert settings.regflow_sqlite_path == "/tmp/users.db"
    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]
