"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from app.models.user import Role


class SignupRequest(BaseModel):
    """Signup body. Fields are optional here so missing ones get a single 400 from validation."""

    name: str | None = Field(default=None, description="Display name")
    email: str | None = Field(default=None, description="Unique email address")
    password: str | None = Field(default=None, description="Password (6-128 chars)")
    role: str | None = Field(default=None, description="admin, vendor or job_seeker")
    company_name: str | None = Field(default=None, description="Required for vendors")


class SigninRequest(BaseModel):
    """Credentials for signin."""

    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(default=None, description="Password")


class MessageResponse(BaseModel):
    message: str


class SignupResponse(BaseModel):
    message: str
    success: bool = True


class UserSummary(BaseModel):
    """Public-safe account view (never includes the password hash)."""

    id: int
    name: str
    email: str
    role: Role
    role_specific_data: str | None = None


class SigninResponse(BaseModel):
    """JWT access token plus the signed-in account. Send as: Authorization: Bearer <token>"""

    message: str
    token: str = Field(..., description="JWT access token")
    user: UserSummary
