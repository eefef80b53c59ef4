# storerating/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines request models for signup/login/password change and the Principal
handed from the access gate to route handlers.
"""
import datetime as dt

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from storerating.core.security import Role
from .validators import Address, Name, Password


class SignupIn(BaseModel):
    """
    Request model for public signup.
    The role is not accepted here; self-registered accounts are always shoppers.
    """
    name: Name
    email: EmailStr
    password: Password
    address: Address


class LoginRequest(BaseModel):
    """Credentials for login; only presence of the password is checked."""
    email: EmailStr
    password: str = Field(min_length=1)


class ChangePasswordIn(BaseModel):
    currentPassword: str = Field(min_length=1)
    newPassword: Password


class Principal(BaseModel):
    """
    The authenticated user resolved for a request.
    Carries every non-secret user field; the password hash is left behind.
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    name: str
    email: str
    address: str
    role: Role
    created_at: dt.datetime | None = None

    @classmethod
    def from_user(cls, user) -> "Principal":
        return cls.model_validate(user)
