"""ORM models for job categories, postings and applications."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text, func

from app.models.base import Base

JOB_STATUSES = ("active", "expired", "closed")
APPLICATION_STATUSES = ("pending", "accepted", "rejected")


class JobCategory(Base):
    __tablename__ = "job_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)


class JobPosting(Base):
    """A vendor's job posting. vendor_id is the owning account."""

    __tablename__ = "job_postings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vendor_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id = Column(
        Integer, ForeignKey("job_categories.id", ondelete="SET NULL"), nullable=True
    )
    title = Column(String(150), nullable=False)
    description = Column(Text, nullable=False)
    required_skills = Column(Text, nullable=True)
    salary_min = Column(Numeric(10, 2), nullable=True)
    salary_max = Column(Numeric(10, 2), nullable=True)
    location = Column(String(150), nullable=True)
    posted_date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    expiry_date = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(16), nullable=False, default="active", index=True)


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(
        Integer, ForeignKey("job_postings.id", ondelete="CASCADE"), nullable=False, index=True
    )
    job_seeker_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    application_date = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    status = Column(String(16), nullable=False, default="pending", index=True)
