"""Edge gate for browser pages: cookie token presence and path role checks before any handler runs."""

import logging
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from app.core.config import Settings
from app.core.security import TokenVerificationError, verify_token
from app.models.user import Role

logger = logging.getLogger(__name__)

# Path prefix -> role required to view it. Plain string prefix, longest wins.
ROLE_PATH_PREFIXES: dict[str, Role] = {
    "/dashboard/admin": Role.ADMIN,
    "/dashboard/vendor": Role.VENDOR,
    "/dashboard/jobseeker": Role.JOB_SEEKER,
}

PUBLIC_PATH_PREFIXES = ("/docs", "/redoc", "/openapi.json", "/static", "/favicon.ico")


@dataclass(frozen=True)
class GateDecision:
    """allow=True lets the request through; otherwise redirect to redirect_to."""

    allow: bool
    redirect_to: str | None = None
    clear_cookie: bool = False


ALLOW = GateDecision(allow=True)


def _matches(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix.rstrip("/") + "/")


def required_role(path: str) -> Role | None:
    best: tuple[int, Role] | None = None
    for prefix, role in ROLE_PATH_PREFIXES.items():
        if path.startswith(prefix) and (best is None or len(prefix) > best[0]):
            best = (len(prefix), role)
    return best[1] if best else None


def is_public(path: str, settings: Settings) -> bool:
    if path == "/":
        return True
    return any(_matches(path, p) for p in (settings.API_PREFIX, *PUBLIC_PATH_PREFIXES))


def decide(path: str, token: str | None, settings: Settings) -> GateDecision:
    """Apply the edge decision table to one request path and its cookie token."""
    if is_public(path, settings):
        return ALLOW
    on_login = path == settings.LOGIN_PATH
    if not token:
        return ALLOW if on_login else GateDecision(False, settings.LOGIN_PATH)
    try:
        claims = verify_token(token, settings)
    except TokenVerificationError as e:
        logger.info("Edge gate rejected cookie token: %s", e.reason)
        return GateDecision(False, settings.LOGIN_PATH, clear_cookie=True)
    if on_login:
        return GateDecision(False, settings.LANDING_PATH)
    needed = required_role(path)
    if needed is not None and claims.role is not needed:
        return GateDecision(False, settings.LOGIN_PATH)
    return ALLOW


class SessionBoundaryMiddleware(BaseHTTPMiddleware):
    """Redirects page requests that lack a verified cookie token or the path's role."""

    def __init__(self, app: ASGIApp, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = request.cookies.get(self.settings.AUTH_COOKIE_NAME)
        decision = decide(request.url.path, token, self.settings)
        if decision.allow:
            return await call_next(request)
        response = RedirectResponse(url=decision.redirect_to, status_code=307)
        if decision.clear_cookie:
            response.delete_cookie(self.settings.AUTH_COOKIE_NAME)
        return response
