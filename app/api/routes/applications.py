"""Job applications: job seekers apply; applicants and posting owners read."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user, require_job_seeker, require_owner_or_admin
from app.core.database import get_db
from app.core.exceptions import AuthorizationError, NotFoundError
from app.core.security import TokenClaims
from app.models import JobApplication, JobPosting, JobSeekerProfile, User, VendorProfile
from app.schemas.job import (
    ApplicantItem,
    ApplicantsResponse,
    ApplicationCreate,
    CreatedResponse,
    SeekerApplicationItem,
    SeekerApplicationsResponse,
)
from app.services.authorization import is_owner_or_admin

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def submit_application(
    body: ApplicationCreate,
    seeker: Annotated[TokenClaims, Depends(require_job_seeker)],
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Apply to a posting as the calling job seeker."""
    if db.get(JobPosting, body.job_id) is None:
        raise NotFoundError("Job not found")
    application = JobApplication(
        job_id=body.job_id,
        job_seeker_id=seeker.subject_id,
        status="pending",
    )
    db.add(application)
    db.commit()
    return CreatedResponse(message="Application submitted successfully", id=application.id)


@router.get("/jobseeker/{id}", response_model=SeekerApplicationsResponse)
def list_seeker_applications(
    id: int,
    _user: Annotated[TokenClaims, Depends(require_owner_or_admin("id"))],
    db: Annotated[Session, Depends(get_db)],
) -> SeekerApplicationsResponse:
    rows = (
        db.query(JobApplication, JobPosting, VendorProfile.company_name)
        .join(JobPosting, JobApplication.job_id == JobPosting.id)
        .outerjoin(VendorProfile, VendorProfile.user_id == JobPosting.vendor_id)
        .filter(JobApplication.job_seeker_id == id)
        .order_by(JobApplication.id)
        .all()
    )
    return SeekerApplicationsResponse(
        message="Applications retrieved successfully",
        applications=[
            SeekerApplicationItem(
                id=app.id,
                job_id=job.id,
                status=app.status,
                application_date=app.application_date,
                job_title=job.title,
                job_description=job.description,
                company_name=company_name,
                location=job.location,
                salary_min=job.salary_min,
                salary_max=job.salary_max,
            )
            for app, job, company_name in rows
        ],
    )


@router.get("/job/{job_id}", response_model=ApplicantsResponse)
def list_job_applicants(
    job_id: int,
    current_user: Annotated[TokenClaims, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> ApplicantsResponse:
    """Applicants for a posting; visible to the posting's vendor and admins."""
    job = db.get(JobPosting, job_id)
    if job is None:
        raise NotFoundError("Job not found")
    if not is_owner_or_admin(current_user, job.vendor_id):
        raise AuthorizationError("Access denied. Not authorized.")

    rows = (
        db.query(JobApplication, User, JobSeekerProfile)
        .join(User, JobApplication.job_seeker_id == User.id)
        .outerjoin(JobSeekerProfile, JobSeekerProfile.user_id == User.id)
        .filter(JobApplication.job_id == job_id)
        .order_by(JobApplication.id)
        .all()
    )
    return ApplicantsResponse(
        message="Applications retrieved successfully",
        applications=[
            ApplicantItem(
                id=app.id,
                job_seeker_id=user.id,
                status=app.status,
                application_date=app.application_date,
                applicant_name=user.name,
                applicant_email=user.email,
                resume=profile.resume if profile else None,
                experience=profile.experience if profile else None,
            )
            for app, user, profile in rows
        ],
    )
