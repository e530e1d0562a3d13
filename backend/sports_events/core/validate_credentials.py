"""Credential Validation — sign-in and sign-up form rules.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - First violation raises ValidationError(field, message)
    - Emails are trimmed and lowercased; passwords are never altered
"""

import re

from sports_events.core.errors import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_email(value: str | None) -> str:
    email = (value or "").strip().lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError("Please enter a valid email address", field="email")
    return email


def validate_sign_in(email: str | None, password: str | None) -> tuple[str, str]:
    normalized = check_email(email)
    if not password:
        raise ValidationError("Password is required", field="password")
    return normalized, password


def validate_sign_up(
    email: str | None,
    password: str | None,
    confirm_password: str | None,
    min_password_length: int = 6,
) -> tuple[str, str]:
    normalized = check_email(email)
    if not password or len(password) < min_password_length:
        raise ValidationError(
            f"Password must be at least {min_password_length} characters",
            field="password",
        )
    if not confirm_password:
        raise ValidationError("Please confirm your password", field="confirm_password")
    if password != confirm_password:
        raise ValidationError("Passwords don't match", field="confirm_password")
    return normalized, password
