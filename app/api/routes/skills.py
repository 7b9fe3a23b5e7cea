"""Skills catalogue and per-user skills."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user, require_owner_or_admin
from app.core.database import get_db
from app.core.exceptions import DuplicateError, NotFoundError
from app.core.security import TokenClaims
from app.models import Skill, UserSkill
from app.schemas.job import CreatedResponse
from app.schemas.skill import (
    SkillCreate,
    SkillItem,
    SkillsResponse,
    UserSkillCreate,
    UserSkillItem,
    UserSkillsResponse,
)

router = APIRouter()
user_skills_router = APIRouter()


@router.get("", response_model=SkillsResponse)
def list_skills(db: Annotated[Session, Depends(get_db)]) -> SkillsResponse:
    skills = db.query(Skill).order_by(Skill.skill_name).all()
    return SkillsResponse(
        message="Skills retrieved successfully",
        skills=[SkillItem.model_validate(s) for s in skills],
    )


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_skill(
    body: SkillCreate,
    _user: Annotated[TokenClaims, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    if db.query(Skill.id).filter(Skill.skill_name == body.skill_name).first() is not None:
        raise DuplicateError("Skill already exists")
    skill = Skill(skill_name=body.skill_name)
    db.add(skill)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError("Skill already exists") from None
    return CreatedResponse(message="Skill added successfully", id=skill.id)


@user_skills_router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def add_user_skill(
    body: UserSkillCreate,
    current_user: Annotated[TokenClaims, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Attach a skill to the calling user."""
    if db.get(Skill, body.skill_id) is None:
        raise NotFoundError("Skill not found")
    existing = (
        db.query(UserSkill.id)
        .filter(
            UserSkill.user_id == current_user.subject_id,
            UserSkill.skill_id == body.skill_id,
        )
        .first()
    )
    if existing is not None:
        raise DuplicateError("Skill already added for this user")
    user_skill = UserSkill(
        user_id=current_user.subject_id,
        skill_id=body.skill_id,
        proficiency_level=body.proficiency_level,
    )
    db.add(user_skill)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError("Skill already added for this user") from None
    return CreatedResponse(message="User skill added successfully", id=user_skill.id)


@user_skills_router.get("/{id}", response_model=UserSkillsResponse)
def list_user_skills(
    id: int,
    _user: Annotated[TokenClaims, Depends(require_owner_or_admin("id"))],
    db: Annotated[Session, Depends(get_db)],
) -> UserSkillsResponse:
    rows = (
        db.query(UserSkill, Skill.skill_name)
        .join(Skill, UserSkill.skill_id == Skill.id)
        .filter(UserSkill.user_id == id)
        .order_by(Skill.skill_name)
        .all()
    )
    return UserSkillsResponse(
        message="User skills retrieved successfully",
        user_skills=[
            UserSkillItem(
                id=us.id,
                user_id=us.user_id,
                skill_id=us.skill_id,
                skill_name=skill_name,
                proficiency_level=us.proficiency_level,
            )
            for us, skill_name in rows
        ],
    )
