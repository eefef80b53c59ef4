from typing import Optional

from fastapi import Depends, Header, Request

from storerating.config import settings
from storerating.core.errors import Forbidden, Unauthenticated
from storerating.core.security import Role, decode_access_token
from storerating.models.user import User
from storerating.schemas.auth import Principal


def extract_token(request: Request, authorization: Optional[str]) -> Optional[str]:
    """
    Pick the session token from the request.
    1) Authorization: Bearer xxx
    2) HttpOnly session cookie
    """
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        if token:
            return token
    return request.cookies.get(settings.session_cookie_name) or None


async def authenticate(token: Optional[str]) -> Principal:
    """
    Resolve a session token to the acting user.

    Raises:
        Unauthenticated (AUTH_REQUIRED): No token
        Unauthenticated (AUTH_INVALID_TOKEN): Bad signature, expired, or malformed subject
        Unauthenticated (AUTH_USER_NOT_FOUND): The user behind the token no longer exists
    """
    if not token:
        raise Unauthenticated("Authentication required", code="AUTH_REQUIRED")

    try:
        payload = decode_access_token(token)
        user_id = int(payload["sub"])
    except Exception:
        raise Unauthenticated("Invalid or expired session", code="AUTH_INVALID_TOKEN")

    user = await User.get_or_none(id=user_id)
    if not user:
        raise Unauthenticated("Session user no longer exists", code="AUTH_USER_NOT_FOUND")
    return Principal.from_user(user)


def authorize(principal: Principal, allowed: frozenset) -> Principal:
    """Admit the principal if its role is in the allowed set, otherwise Forbidden."""
    if principal.role not in allowed:
        raise Forbidden(
            f"Role '{principal.role.value}' cannot access this resource",
            code="FORBIDDEN",
        )
    return principal


async def get_current_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Principal:
    """
    FastAPI dependency returning the authenticated Principal.

    Usage:
        @router.get("/protected")
        async def protected_route(user: Principal = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return await authenticate(extract_token(request, authorization))


def require_roles(*roles: Role):
    """
    Build a dependency that admits only the given roles.

    The role set is checked when the dependency is built, so a route can
    only be declared with members of Role.

    Usage:
        @router.get("/admin/stats")
        async def stats(admin: Principal = Depends(require_roles(Role.ADMIN))):
            ...
    """
    if not roles:
        raise ValueError("require_roles needs at least one role")
    for role in roles:
        if not isinstance(role, Role):
            raise TypeError(f"require_roles expects Role members, got {role!r}")
    allowed = frozenset(roles)

    async def _dependency(current: Principal = Depends(get_current_user)) -> Principal:
        return authorize(current, allowed)

    return _dependency


require_admin = require_roles(Role.ADMIN)
require_shopper = require_roles(Role.USER)
require_store_owner = require_roles(Role.STORE_OWNER)
