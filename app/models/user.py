"""ORM models for accounts and their role-specific profiles."""

import enum

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func

from app.models.base import Base


class Role(str, enum.Enum):
    """Closed set of account roles."""

    ADMIN = "admin"
    VENDOR = "vendor"
    JOB_SEEKER = "job_seeker"


class User(Base):
    """
    Account for JWT authentication and role-based access control.

    Exactly one role per account; exactly one matching profile row is created with it.
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ('admin', 'vendor', 'job_seeker')",
            name="role",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class AdminProfile(Base):
    __tablename__ = "admin_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    admin_level = Column(String(50), nullable=True)
    contact_number = Column(String(20), nullable=True)


class JobSeekerProfile(Base):
    __tablename__ = "job_seeker_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    resume = Column(String(255), nullable=True)
    education = Column(Text, nullable=True)
    experience = Column(Text, nullable=True)


class VendorProfile(Base):
    __tablename__ = "vendor_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    company_name = Column(String(150), nullable=False)
    website = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
