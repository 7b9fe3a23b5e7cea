"""Input checks for signup and signin. Run before any store access."""

import re
from dataclasses import dataclass

from app.core.exceptions import ValidationError
from app.core.security import (
    EMAIL_MAX_LEN,
    NAME_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from app.models.user import Role
from app.schemas.auth import SigninRequest, SignupRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
COMPANY_NAME_MAX_LEN = 150


@dataclass(frozen=True)
class SignupInput:
    """Signup fields after validation."""

    name: str
    email: str
    password: str
    role: Role
    company_name: str | None = None


def _check_email(email: str) -> None:
    if len(email) > EMAIL_MAX_LEN or not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email format")


def validate_signup(body: SignupRequest) -> SignupInput:
    """Return normalized signup input or raise ValidationError."""
    name = (body.name or "").strip()
    email = body.email or ""
    password = body.password or ""
    if not name or not email or not password or not body.role:
        raise ValidationError("All fields are required")
    if len(name) > NAME_MAX_LEN:
        raise ValidationError("Name is too long")
    _check_email(email)
    if len(password) < PASSWORD_MIN_LEN:
        raise ValidationError(
            f"Password must be at least {PASSWORD_MIN_LEN} characters long"
        )
    if len(password) > PASSWORD_MAX_LEN:
        raise ValidationError(
            f"Password must be at most {PASSWORD_MAX_LEN} characters long"
        )
    try:
        role = Role(body.role)
    except ValueError:
        raise ValidationError("Invalid role") from None

    company_name = (body.company_name or "").strip() or None
    if role is Role.VENDOR:
        if company_name is None:
            raise ValidationError("Company name is required for vendors")
        if len(company_name) > COMPANY_NAME_MAX_LEN:
            raise ValidationError("Company name is too long")
    return SignupInput(
        name=name,
        email=email,
        password=password,
        role=role,
        company_name=company_name,
    )


def validate_signin(body: SigninRequest) -> tuple[str, str]:
    """Return (email, password) or raise ValidationError."""
    if not body.email or not body.password:
        raise ValidationError("Email and password are required")
    _check_email(body.email)
    return body.email, body.password
