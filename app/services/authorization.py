"""Authorization policies over verified token claims. Pure functions, no I/O."""

from collections.abc import Iterable

from app.core.security import TokenClaims
from app.models.user import Role


def has_role(claims: TokenClaims, allowed: Iterable[Role]) -> bool:
    """Role-exact policy: the token's role is one of the allowed roles."""
    return claims.role in set(allowed)


def is_owner_or_admin(claims: TokenClaims, owner_id: int | None) -> bool:
    """Permit the resource owner or any admin."""
    if claims.role is Role.ADMIN:
        return True
    return owner_id is not None and claims.subject_id == owner_id
