# storerating/schemas/user.py
"""
Public representation of a user account.
The password hash is never part of any user payload.
"""
from typing import Any, List

from pydantic import BaseModel

from storerating.core.security import Role


class UserOut(BaseModel):
    """User as returned by auth and admin endpoints."""
    id: int
    name: str
    email: str
    address: str
    role: Role
    createdAt: str | None = None  # Account creation timestamp (ISO format)


class UserListOut(BaseModel):
    items: List[UserOut]
    total: int


def user_to_dict(u: Any) -> dict:
    """
    Convert a User model (or a Principal) to the public dictionary format.

    Args:
        u: Object exposing id, name, email, address, role and created_at
    """
    return {
        "id": u.id,
        "name": u.name,
        "email": u.email,
        "address": u.address,
        "role": Role(u.role).value,
        "createdAt": u.created_at.isoformat() if u.created_at else None,
    }
