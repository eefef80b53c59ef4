# storerating/schemas/admin.py
"""
Pydantic schemas for admin user management endpoints.
"""
from typing import Literal

from pydantic import BaseModel, EmailStr

from storerating.core.security import Role
from .validators import Address, Name, Password

UserSortField = Literal["name", "email", "address", "role"]


class AdminUserCreateIn(BaseModel):
    """
    Request model for admin-created accounts.
    Unlike signup, the admin chooses the role (default: user).
    """
    name: Name
    email: EmailStr
    password: Password
    address: Address
    role: Role = Role.USER
