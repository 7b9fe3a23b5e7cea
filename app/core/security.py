"""Password hashing and JWT creation/verification for authentication."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import Settings
from app.models.user import Role

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 10

# Length limits for signup input validation.
NAME_MAX_LEN = 100
EMAIL_MAX_LEN = 150
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Any failure means not authenticated."""
    try:
        pw_bytes = plain_password.encode("utf-8")[:72]
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except Exception:
        logger.warning("Password verification raised; treating as a mismatch.")
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Verified identity carried by a token."""

    subject_id: int
    role: Role


class TokenVerificationError(Exception):
    """Token could not be verified. reason is one of expired, invalid_signature, malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


def create_access_token(
    sub: int,
    role: Role | str,
    settings: Settings,
    now: datetime | None = None,
) -> str:
    """Create a JWT access token with sub (account id), role, iat and exp."""
    issued_at = now or datetime.now(UTC)
    expire = issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": Role(role).value,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat", "sub"]},
    )


def verify_token(token: str, settings: Settings) -> TokenClaims:
    """Verify signature, expiry and payload shape. Raises TokenVerificationError only."""
    try:
        payload = decode_access_token(token, settings)
    except jwt.ExpiredSignatureError:
        raise TokenVerificationError("expired") from None
    except jwt.InvalidSignatureError:
        raise TokenVerificationError("invalid_signature") from None
    except jwt.PyJWTError:
        raise TokenVerificationError("malformed") from None

    try:
        subject_id = int(payload["sub"])
        role = Role(payload.get("role"))
    except (KeyError, TypeError, ValueError):
        raise TokenVerificationError("malformed") from None
    return TokenClaims(subject_id=subject_id, role=role)
