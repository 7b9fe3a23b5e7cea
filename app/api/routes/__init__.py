"""API routes mounted under API_PREFIX."""

from fastapi import APIRouter

from app.api.routes import applications, auth, categories, health, jobs, skills, users
from app.schemas.auth import MessageResponse

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
router.include_router(applications.router, prefix="/applications", tags=["applications"])
router.include_router(skills.router, prefix="/skills", tags=["skills"])
router.include_router(skills.user_skills_router, prefix="/user-skills", tags=["skills"])


@router.get("", response_model=MessageResponse)
def welcome() -> MessageResponse:
    return MessageResponse(message="Welcome to HireHive")
