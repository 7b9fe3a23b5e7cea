"""Pydantic request/response schemas."""

from app.schemas.auth import (
    MessageResponse,
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
    UserSummary,
)
from app.schemas.health import HealthResponse
from app.schemas.job import (
    ApplicantsResponse,
    ApplicationCreate,
    CategoriesResponse,
    CategoryCreate,
    CreatedResponse,
    JobCreate,
    JobsResponse,
    SeekerApplicationsResponse,
)
from app.schemas.skill import SkillCreate, SkillsResponse, UserSkillCreate, UserSkillsResponse
from app.schemas.user import UserDetail, UserResponse, UsersListResponse

__all__ = [
    "ApplicantsResponse",
    "ApplicationCreate",
    "CategoriesResponse",
    "CategoryCreate",
    "CreatedResponse",
    "HealthResponse",
    "JobCreate",
    "JobsResponse",
    "MessageResponse",
    "SeekerApplicationsResponse",
    "SigninRequest",
    "SigninResponse",
    "SignupRequest",
    "SignupResponse",
    "SkillCreate",
    "SkillsResponse",
    "UserDetail",
    "UserResponse",
    "UserSkillCreate",
    "UserSkillsResponse",
    "UserSummary",
    "UsersListResponse",
]
