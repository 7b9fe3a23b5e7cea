"""Schemas for skills and user skills."""

from typing import Annotated, Literal

from pydantic import BaseModel, StringConstraints

SkillName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class SkillCreate(BaseModel):
    skill_name: SkillName


class SkillItem(BaseModel):
    id: int
    skill_name: str

    model_config = {"from_attributes": True}


class SkillsResponse(BaseModel):
    message: str
    skills: list[SkillItem]


class UserSkillCreate(BaseModel):
    """Skill claimed by the authenticated user."""

    skill_id: int
    proficiency_level: Literal["Beginner", "Intermediate", "Advanced"] | None = None


class UserSkillItem(BaseModel):
    id: int
    user_id: int
    skill_id: int
    skill_name: str
    proficiency_level: str | None = None


class UserSkillsResponse(BaseModel):
    message: str
    user_skills: list[UserSkillItem]
