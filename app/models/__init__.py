"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.job import JobApplication, JobCategory, JobPosting
from app.models.skill import Skill, UserSkill
from app.models.user import AdminProfile, JobSeekerProfile, Role, User, VendorProfile

__all__ = [
    "AdminProfile",
    "Base",
    "JobApplication",
    "JobCategory",
    "JobPosting",
    "JobSeekerProfile",
    "Role",
    "Skill",
    "User",
    "UserSkill",
    "VendorProfile",
]
