# storerating/core/bootstrap.py
"""
Bootstrap module for application initialization.
Handles initial setup tasks such as creating default admin user on first startup.
"""
import logging

from storerating.config import settings
from storerating.core.security import Role, hash_password
from storerating.models.user import User

logger = logging.getLogger("uvicorn.error")

async def ensure_default_admin() -> User | None:
    """
    If no admin exists in the database, create a default admin from settings.
    Only takes effect under the following conditions:
      - Currently no user with role=admin
      - And ADMIN_PASSWORD is set (to avoid using a default weak password)
    Environment variables:
      ADMIN_NAME     (default: "System Administrator")
      ADMIN_EMAIL    (default: "admin@storerating.com")
      ADMIN_ADDRESS  (default: a placeholder street address)
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    if await User.filter(role=Role.ADMIN).exists():
        return None

    if not settings.admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return None

    # The email may already belong to a non-admin account; never take it over
    if await User.filter(email=settings.admin_email).exists():
        logger.warning("[bootstrap] No admin present, but %s is already registered -> skip creating default admin.",
                       settings.admin_email)
        return None

    u = await User.create(
        name=settings.admin_name,
        email=settings.admin_email,
        password_hash=hash_password(settings.admin_password),
        address=settings.admin_address,
        role=Role.ADMIN,
    )
    logger.warning("[bootstrap] Created default admin -> email=%s id=%s", u.email, u.id)
    return u
