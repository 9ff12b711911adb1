"""Interactive terminal front end for the registration form."""

from __future__ import annotations

import argparse
import getpass
from pathlib import Path
from typing import Callable

import httpx

from regflow.client.controller import RegistrationFormController
from regflow.client.form import FormState
from regflow.client.form import PasswordStrength
from regflow.client.storage import TokenStorage

DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_TOKEN_PATH = Path.home() / ".regflow" / "session.json"


def render_strength_hint(strength: PasswordStrength) -> str:
    return f"Password strength: {strength.value}"


def render_result(state: FormState) -> str:
    return state.error if state.error else state.success


def run_cli(
    controller: RegistrationFormController,
    input_fn: Callable[[str], str] = input,
    password_fn: Callable[[str], str] = getpass.getpass,
    output_fn: Callable[[str], None] = print,
) -> int:
    """Collect the three fields, show the strength hint and submit once."""
    controller.on_field_change("name", input_fn("Name: "))
    controller.on_field_change("email", input_fn("Email: "))
    controller.on_field_change("password", password_fn("Password: "))
    output_fn(render_strength_hint(controller.password_strength))

    output_fn("Registering...")
    state = controller.submit()
    output_fn(render_result(state))
    return 1 if state.error else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a new account and log in.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Registration service URL.")
    parser.add_argument(
        "--token-file",
        type=Path,
        default=DEFAULT_TOKEN_PATH,
        help="Where the session token is stored after login.",
    )
    args = parser.parse_args(argv)

    with httpx.Client(base_url=args.base_url) as http:
        controller = RegistrationFormController(http=http, storage=TokenStorage(args.token_file))
        return run_cli(controller)


if __name__ == "__main__":
    raise SystemExit(main())
