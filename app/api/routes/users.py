"""User lookups: admin list and owner-or-admin detail with role-specific data."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.routes.auth import require_admin, require_owner_or_admin
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.core.security import TokenClaims
from app.schemas.user import UserResponse, UsersListResponse
from app.services.accounts import get_user_detail, list_user_details

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List all users (admin only)."""
    return UsersListResponse(
        message="Users retrieved successfully",
        users=list_user_details(db),
    )


@router.get("/{id}", response_model=UserResponse)
def get_user(
    id: int,
    _user: Annotated[TokenClaims, Depends(require_owner_or_admin("id"))],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Return one user with resume, company name or admin level as role_specific_data."""
    detail = get_user_detail(db, id)
    if detail is None:
        raise NotFoundError("User not found")
    return UserResponse(message="User retrieved successfully", user=detail)
