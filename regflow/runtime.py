"""Process-wide runtime state shared by REST handlers."""

from __future__ import annotations

from regflow.auth.service import startup_auth_schema
from regflow.core.config import Settings
from regflow.core.config import load_settings
from regflow.core.log_config import configure_logging

settings = load_settings()


def startup() -> None:
    """Reload settings, configure logging and ensure the users table exists."""
    global settings
    settings = load_settings()
    configure_logging(settings.regflow_log_level)
    startup_auth_schema(settings)


__all__ = [
    "Settings",
    "settings",
    "startup",
]
