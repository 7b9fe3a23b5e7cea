"""Browser page placeholders behind the session boundary middleware. No rendering here."""

from fastapi import APIRouter

router = APIRouter(include_in_schema=False)


@router.get("/login")
def login_page() -> dict[str, str]:
    return {"page": "login"}


@router.get("/dashboard")
def dashboard_page() -> dict[str, str]:
    return {"page": "dashboard"}


@router.get("/dashboard/admin")
def admin_dashboard_page() -> dict[str, str]:
    return {"page": "admin_dashboard"}


@router.get("/dashboard/vendor")
def vendor_dashboard_page() -> dict[str, str]:
    return {"page": "vendor_dashboard"}


@router.get("/dashboard/jobseeker")
def job_seeker_dashboard_page() -> dict[str, str]:
    return {"page": "job_seeker_dashboard"}
