"""Job postings: public list with category and vendor names, vendor-only create."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routes.auth import require_vendor
from app.core.database import get_db
from app.core.exceptions import NotFoundError, ValidationError
from app.core.security import TokenClaims
from app.models import JobCategory, JobPosting, User
from app.schemas.job import CreatedResponse, JobCreate, JobItem, JobsResponse

router = APIRouter()


@router.get("", response_model=JobsResponse)
def list_jobs(db: Annotated[Session, Depends(get_db)]) -> JobsResponse:
    """All postings, newest first."""
    rows = (
        db.query(JobPosting, JobCategory.name, User.name)
        .outerjoin(JobCategory, JobPosting.category_id == JobCategory.id)
        .outerjoin(User, JobPosting.vendor_id == User.id)
        .order_by(JobPosting.posted_date.desc(), JobPosting.id.desc())
        .all()
    )
    jobs = [
        JobItem(
            id=job.id,
            vendor_id=job.vendor_id,
            category_id=job.category_id,
            title=job.title,
            description=job.description,
            required_skills=job.required_skills,
            salary_min=job.salary_min,
            salary_max=job.salary_max,
            location=job.location,
            posted_date=job.posted_date,
            expiry_date=job.expiry_date,
            status=job.status,
            category_name=category_name,
            vendor_name=vendor_name,
        )
        for job, category_name, vendor_name in rows
    ]
    return JobsResponse(jobs=jobs)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    body: JobCreate,
    vendor: Annotated[TokenClaims, Depends(require_vendor)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Create a posting owned by the calling vendor."""
    if (
        body.salary_min is not None
        and body.salary_max is not None
        and body.salary_min > body.salary_max
    ):
        raise ValidationError("salary_min must not exceed salary_max")
    if body.category_id is not None and db.get(JobCategory, body.category_id) is None:
        raise NotFoundError("Category not found")

    job = JobPosting(
        vendor_id=vendor.subject_id,
        category_id=body.category_id,
        title=body.title,
        description=body.description,
        required_skills=body.required_skills,
        salary_min=body.salary_min,
        salary_max=body.salary_max,
        location=body.location,
        expiry_date=body.expiry_date,
        status="active",
    )
    db.add(job)
    db.commit()
    return CreatedResponse(message="Job posting created successfully", id=job.id)
