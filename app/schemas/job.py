"""Schemas for job categories, postings and applications."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

# Surrounding whitespace is stripped before the length checks run.
CategoryName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
JobTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=150)]


class CategoryCreate(BaseModel):
    name: CategoryName
    description: str | None = None


class CategoryItem(BaseModel):
    id: int
    name: str
    description: str | None = None

    model_config = {"from_attributes": True}


class CategoriesResponse(BaseModel):
    message: str
    categories: list[CategoryItem]


class JobCreate(BaseModel):
    """New posting. The vendor is taken from the token, never from the body."""

    title: JobTitle
    description: str = Field(..., min_length=1)
    category_id: int | None = None
    required_skills: str | None = None
    salary_min: Decimal | None = Field(default=None, ge=0)
    salary_max: Decimal | None = Field(default=None, ge=0)
    location: str | None = Field(default=None, max_length=150)
    expiry_date: datetime | None = None


class JobItem(BaseModel):
    id: int
    vendor_id: int
    category_id: int | None = None
    title: str
    description: str
    required_skills: str | None = None
    salary_min: Decimal | None = None
    salary_max: Decimal | None = None
    location: str | None = None
    posted_date: datetime | None = None
    expiry_date: datetime | None = None
    status: str
    category_name: str | None = None
    vendor_name: str | None = None


class JobsResponse(BaseModel):
    jobs: list[JobItem]


class CreatedResponse(BaseModel):
    """Acknowledgement for a created row."""

    message: str
    id: int


class ApplicationCreate(BaseModel):
    job_id: int


class SeekerApplicationItem(BaseModel):
    """Application as seen by the applicant."""

    id: int
    job_id: int
    status: str
    application_date: datetime | None = None
    job_title: str
    job_description: str
    company_name: str | None = None
    location: str | None = None
    salary_min: Decimal | None = None
    salary_max: Decimal | None = None


class ApplicantItem(BaseModel):
    """Application as seen by the posting's vendor."""

    id: int
    job_seeker_id: int
    status: str
    application_date: datetime | None = None
    applicant_name: str
    applicant_email: str
    resume: str | None = None
    experience: str | None = None


class SeekerApplicationsResponse(BaseModel):
    message: str
    applications: list[SeekerApplicationItem]


class ApplicantsResponse(BaseModel):
    message: str
    applications: list[ApplicantItem]
