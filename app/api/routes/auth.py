"""Signup, signin, logout and auth dependencies (get_current_user, require_role, require_owner_or_admin)."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.exceptions import AuthenticationError, AuthorizationError
from app.core.security import TokenClaims, TokenVerificationError, verify_token
from app.models.user import Role
from app.schemas.auth import (
    MessageResponse,
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
)
from app.services.accounts import authenticate, register_account
from app.services.authorization import has_role, is_owner_or_admin
from app.services.validation import validate_signin, validate_signup

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> SignupResponse:
    """
    Register an account with its role profile. Does not sign in:
    call /signin afterwards for a token.
    """
    data = validate_signup(body)
    register_account(db, data)
    return SignupResponse(message="User registered successfully", success=True)


@router.post("/signin", response_model=SigninResponse)
def signin(
    body: SigninRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SigninResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    email, password = validate_signin(body)
    token, user = authenticate(db, email, password, settings)
    return SigninResponse(message="Login successful", token=token, user=user)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Clear the token cookie. Issued tokens stay valid until they expire."""
    response.delete_cookie(settings.AUTH_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaims:
    """Dependency: require valid Bearer JWT and return its claims. Raises 401 if missing or invalid."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access denied. No token provided.")
    try:
        return verify_token(credentials.credentials, settings)
    except TokenVerificationError:
        raise AuthenticationError("Invalid or expired token") from None


def require_role(*roles: Role) -> Callable[..., TokenClaims]:
    """Dependency factory: authenticated user whose role is one of roles. Raises 403 otherwise."""
    labels = " or ".join(r.value for r in roles)

    def dependency(
        current_user: Annotated[TokenClaims, Depends(get_current_user)],
    ) -> TokenClaims:
        if not has_role(current_user, roles):
            raise AuthorizationError(f"Access denied. {labels} rights required.")
        return current_user

    return dependency


def require_owner_or_admin(param: str = "id") -> Callable[..., TokenClaims]:
    """Dependency factory: the path parameter names the owning account id; admins always pass."""

    def dependency(
        request: Request,
        current_user: Annotated[TokenClaims, Depends(get_current_user)],
    ) -> TokenClaims:
        try:
            owner_id = int(request.path_params[param])
        except (KeyError, TypeError, ValueError):
            owner_id = None
        if not is_owner_or_admin(current_user, owner_id):
            raise AuthorizationError("Access denied. Not authorized.")
        return current_user

    return dependency


require_admin = require_role(Role.ADMIN)
require_vendor = require_role(Role.VENDOR)
require_job_seeker = require_role(Role.JOB_SEEKER)


@router.get("/admin", response_model=MessageResponse)
def admin_welcome(
    _user: Annotated[TokenClaims, Depends(require_admin)],
) -> MessageResponse:
    return MessageResponse(message="Welcome, admin")


@router.get("/vendor", response_model=MessageResponse)
def vendor_welcome(
    _user: Annotated[TokenClaims, Depends(require_vendor)],
) -> MessageResponse:
    return MessageResponse(message="Welcome, vendor")


@router.get("/job-seeker", response_model=MessageResponse)
def job_seeker_welcome(
    _user: Annotated[TokenClaims, Depends(require_job_seeker)],
) -> MessageResponse:
    return MessageResponse(message="Welcome, job seeker")
