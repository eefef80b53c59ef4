# storerating/api/v1/routers/auth.py
import logging

from fastapi import APIRouter, Depends, Response

from storerating.api.v1.deps import get_current_user
from storerating.config import settings
from storerating.core.errors import Unauthenticated, ValidationError
from storerating.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    Role,
    create_access_token,
    hash_password,
    verify_password,
)
from storerating.models.user import User
from storerating.schemas.auth import ChangePasswordIn, LoginRequest, Principal, SignupIn
from storerating.schemas.user import user_to_dict
from storerating.services.directory import create_user

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/auth", tags=["auth"])


def _start_session(response: Response, user: User) -> str:
    """Issue a session token for the user and set it as the HttpOnly session cookie."""
    token = create_access_token(str(user.id), user.role.value)
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return token


@router.post("/signup")
async def signup(body: SignupIn, response: Response):
    """
    Register a new shopper account and log it in.

    The role is always "user"; other roles are only created by admins.

    Returns:
        dict: {"success": True, "data": {"user": {...}, "accessToken": str}}

    Error codes:
        - VALIDATION_ERROR (400): Field rules violated
        - EMAIL_EXISTS (400): Email already registered
    """
    user = await create_user(
        name=body.name,
        email=str(body.email),
        password=body.password,
        address=body.address,
        role=Role.USER,
    )
    token = _start_session(response, user)
    return {"success": True, "data": {"user": user_to_dict(user), "accessToken": token}}


@router.post("/login")
async def login(payload: LoginRequest, response: Response):
    """
    Authenticate by email and password.

    The token is returned in the body and also set as the HttpOnly
    session cookie for browser clients.

    Raises:
        Unauthenticated (401, AUTH_INVALID_CREDENTIALS): Unknown email or wrong password
    """
    user = await User.get_or_none(email=str(payload.email))
    if not user or not verify_password(payload.password, user.password_hash):
        logger.warning("[auth] rejected login for email=%s", payload.email)
        raise Unauthenticated("Invalid email or password", code="AUTH_INVALID_CREDENTIALS")
    token = _start_session(response, user)
    return {"success": True, "data": {"user": user_to_dict(user), "accessToken": token}}


@router.get("/me")
async def me(user: Principal = Depends(get_current_user)):
    """Current authenticated user (never includes the password hash)."""
    return {"success": True, "data": user_to_dict(user)}


@router.post("/logout")
async def logout(response: Response, user: Principal = Depends(get_current_user)):
    """
    Log out by clearing the session cookie.

    Note:
        The token itself stays valid until it expires; clients holding a
        copy of it (Bearer usage) are not affected.
    """
    response.delete_cookie(settings.session_cookie_name)
    return {"success": True, "data": {"message": "Logged out successfully"}}


@router.post("/change-password")
async def change_password(body: ChangePasswordIn, user: Principal = Depends(get_current_user)):
    """
    Change the password of the logged-in user after checking the current one.

    Error codes:
        - CURRENT_PASSWORD_INCORRECT (400, not 401: the session itself is still valid)
        - VALIDATION_ERROR (400): New password violates the password policy
    """
    account = await User.get(id=user.id)
    if not verify_password(body.currentPassword, account.password_hash):
        raise ValidationError("Current password is incorrect", code="CURRENT_PASSWORD_INCORRECT")
    account.password_hash = hash_password(body.newPassword)
    await account.save(update_fields=["password_hash"])
    return {"success": True, "data": {"message": "Password updated successfully"}}
