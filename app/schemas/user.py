"""Response schemas for user lookups."""

from datetime import datetime

from pydantic import BaseModel

from app.schemas.auth import UserSummary


class UserDetail(UserSummary):
    created_at: datetime | None = None


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    message: str
    users: list[UserDetail]


class UserResponse(BaseModel):
    message: str
    user: UserDetail
