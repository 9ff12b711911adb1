"""Client side of the registration flow."""

from regflow.client.controller import RegistrationFailedError
from regflow.client.controller import RegistrationFormController
from regflow.client.form import FormState
from regflow.client.form import PasswordStrength
from regflow.client.form import compute_password_strength
from regflow.client.form import on_field_change
from regflow.client.storage import TokenStorage

__all__ = [
    "FormState",
    "PasswordStrength",
    "RegistrationFailedError",
    "RegistrationFormController",
    "TokenStorage",
    "compute_password_strength",
    "on_field_change",
]
