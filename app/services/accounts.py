"""Account signup, signin and lookup against the credential store."""

import logging

from sqlalchemy import case
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.core.config import Settings
from app.core.exceptions import AuthenticationError, DuplicateError, StoreError
from app.core.security import create_access_token, hash_password, verify_password
from app.models import AdminProfile, JobSeekerProfile, Role, User, VendorProfile
from app.schemas.auth import UserSummary
from app.schemas.user import UserDetail
from app.services.validation import SignupInput

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"

# Checked against when the email is unknown so both signin failures cost one bcrypt round.
_DUMMY_HASH = hash_password("hirehive-unknown-account")


def build_profile(user_id: int, data: SignupInput) -> AdminProfile | JobSeekerProfile | VendorProfile:
    """Return the single profile row matching the account's role."""
    if data.role is Role.VENDOR:
        return VendorProfile(user_id=user_id, company_name=data.company_name)
    if data.role is Role.JOB_SEEKER:
        return JobSeekerProfile(user_id=user_id)
    return AdminProfile(user_id=user_id)


def register_account(db: Session, data: SignupInput) -> int:
    """
    Create an account and its role profile in one transaction; return the account id.

    Raises DuplicateError if the email is on file (no password check is made) and
    StoreError if any insert fails; in that case nothing is left behind.
    """
    existing = db.query(User.id).filter(User.email == data.email).first()
    if existing is not None:
        logger.info("Signup rejected: email already registered.")
        raise DuplicateError("Email already registered")

    password_hash = hash_password(data.password)
    try:
        user = User(
            name=data.name,
            email=data.email,
            password_hash=password_hash,
            role=data.role.value,
        )
        db.add(user)
        db.flush()
        user_id = user.id
        db.add(build_profile(user_id, data))
        db.commit()
    except IntegrityError:
        db.rollback()
        # Unique email lost a race with a concurrent signup.
        if db.query(User.id).filter(User.email == data.email).first() is not None:
            logger.info("Signup rejected: email registered concurrently.")
            raise DuplicateError("Email already registered") from None
        logger.exception("Signup failed; account and profile inserts rolled back.")
        raise StoreError("Error creating account") from None
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Signup failed; account and profile inserts rolled back.")
        raise StoreError("Error creating account") from None
    logger.info("Account created: id=%s role=%s", user_id, data.role.value)
    return user_id


def _role_specific_data():
    return case(
        (User.role == Role.JOB_SEEKER.value, JobSeekerProfile.resume),
        (User.role == Role.VENDOR.value, VendorProfile.company_name),
        (User.role == Role.ADMIN.value, AdminProfile.admin_level),
    ).label("role_specific_data")


def _users_with_profile(db: Session) -> Query:
    """Users joined to their profile with one denormalized role_specific_data column."""
    return (
        db.query(User, _role_specific_data())
        .outerjoin(JobSeekerProfile, JobSeekerProfile.user_id == User.id)
        .outerjoin(VendorProfile, VendorProfile.user_id == User.id)
        .outerjoin(AdminProfile, AdminProfile.user_id == User.id)
    )


def _stored_role(user: User) -> Role:
    try:
        return Role(user.role)
    except ValueError:
        logger.error("Account id=%s has unknown stored role %r.", user.id, user.role)
        raise StoreError() from None


def _detail(user: User, role_specific_data: str | None) -> UserDetail:
    return UserDetail(
        id=user.id,
        name=user.name,
        email=user.email,
        role=_stored_role(user),
        role_specific_data=role_specific_data,
        created_at=user.created_at,
    )


def authenticate(
    db: Session, email: str, password: str, settings: Settings
) -> tuple[str, UserSummary]:
    """
    Check credentials and issue a token.

    Unknown email and wrong password raise the same AuthenticationError.
    """
    row = _users_with_profile(db).filter(User.email == email).first()
    if row is None:
        verify_password(password, _DUMMY_HASH)
        logger.info("Signin failed: invalid credentials.")
        raise AuthenticationError(INVALID_CREDENTIALS)
    user, role_specific_data = row
    if not verify_password(password, user.password_hash):
        logger.info("Signin failed: invalid credentials.")
        raise AuthenticationError(INVALID_CREDENTIALS)

    role = _stored_role(user)
    token = create_access_token(sub=user.id, role=role, settings=settings)
    summary = UserSummary(
        id=user.id,
        name=user.name,
        email=user.email,
        role=role,
        role_specific_data=role_specific_data,
    )
    return token, summary


def get_user_detail(db: Session, user_id: int) -> UserDetail | None:
    row = _users_with_profile(db).filter(User.id == user_id).first()
    if row is None:
        return None
    return _detail(*row)


def list_user_details(db: Session) -> list[UserDetail]:
    return [_detail(user, data) for user, data in _users_with_profile(db).order_by(User.id).all()]
