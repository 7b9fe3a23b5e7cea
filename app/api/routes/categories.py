"""Job categories: public list, admin create."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routes.auth import require_admin
from app.core.database import get_db
from app.core.security import TokenClaims
from app.models import JobCategory
from app.schemas.job import CategoriesResponse, CategoryCreate, CategoryItem, CreatedResponse

router = APIRouter()


@router.get("", response_model=CategoriesResponse)
def list_categories(db: Annotated[Session, Depends(get_db)]) -> CategoriesResponse:
    categories = db.query(JobCategory).order_by(JobCategory.id).all()
    return CategoriesResponse(
        message="Categories retrieved successfully",
        categories=[CategoryItem.model_validate(c) for c in categories],
    )


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    _admin: Annotated[TokenClaims, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    category = JobCategory(name=body.name, description=body.description)
    db.add(category)
    db.commit()
    return CreatedResponse(message="Category created successfully", id=category.id)
