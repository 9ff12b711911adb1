"""Auth module for register/login endpoints."""

from regflow.auth.http import handle_http_exception
from regflow.auth.http import handle_request_validation_error
from regflow.auth.http import register_exception_handlers
from regflow.auth.models import LoginRequest
from regflow.auth.models import RegisterRequest
from regflow.auth.service import login_user
from regflow.auth.service import me_user
from regflow.auth.service import register_user
from regflow.auth.service import startup_auth_schema

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "handle_http_exception",
    "handle_request_validation_error",
    "login_user",
    "me_user",
    "register_exception_handlers",
    "register_user",
    "startup_auth_schema",
]
