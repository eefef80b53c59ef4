# storerating/services/directory.py
"""
Account and store creation plus the admin listings.

Uniqueness (user email, store email, one store per owner) is enforced by
database constraints; the pre-checks only exist to return a precise error.
"""
import logging
from typing import List, Optional

from tortoise.exceptions import IntegrityError

from storerating.core.errors import NotFound, ValidationError
from storerating.core.security import Role, hash_password
from storerating.models.store import Store
from storerating.models.user import User
from .ratings import SORT_ORDERS

logger = logging.getLogger("uvicorn.error")

_USER_SORT_KEYS = {
    "name": lambda u: u.name.lower(),
    "email": lambda u: u.email.lower(),
    "address": lambda u: u.address.lower(),
    "role": lambda u: u.role.value,
}


def _email_taken() -> ValidationError:
    return ValidationError("Email already registered", code="EMAIL_EXISTS")


async def create_user(
    name: str,
    email: str,
    password: str,
    address: str,
    role: Role = Role.USER,
) -> User:
    """
    Create an account with a hashed password.

    Raises:
        ValidationError (EMAIL_EXISTS): If the email is already registered
    """
    if await User.filter(email=email).exists():
        raise _email_taken()
    try:
        user = await User.create(
            name=name,
            email=email,
            password_hash=hash_password(password),
            address=address,
            role=Role(role),
        )
    except IntegrityError:
        raise _email_taken()
    logger.info("[directory] created user id=%s role=%s", user.id, user.role.value)
    return user


async def create_store(name: str, email: str, address: str, owner_id: int) -> Store:
    """
    Create a store for a store owner.

    Raises:
        NotFound (OWNER_NOT_FOUND): No user with owner_id
        ValidationError (OWNER_NOT_STORE_OWNER): The user is not a store owner
        ValidationError (OWNER_HAS_STORE): The owner already has a store
        ValidationError (STORE_EMAIL_EXISTS): Another store uses this email
    """
    owner = await User.get_or_none(id=owner_id)
    if owner is None:
        raise NotFound("Owner not found", code="OWNER_NOT_FOUND")
    if owner.role != Role.STORE_OWNER:
        raise ValidationError("Selected user is not a store owner", code="OWNER_NOT_STORE_OWNER")
    if await Store.filter(owner_id=owner_id).exists():
        raise ValidationError("This owner already has a store", code="OWNER_HAS_STORE")
    if await Store.filter(email=email).exists():
        raise ValidationError("Store email already registered", code="STORE_EMAIL_EXISTS")

    try:
        store = await Store.create(name=name, email=email, address=address, owner_id=owner_id)
    except IntegrityError:
        # Lost a race against a concurrent create; report whichever constraint now holds
        if await Store.filter(owner_id=owner_id).exists():
            raise ValidationError("This owner already has a store", code="OWNER_HAS_STORE")
        raise ValidationError("Store email already registered", code="STORE_EMAIL_EXISTS")
    logger.info("[directory] created store id=%s owner=%s", store.id, owner_id)
    return store


async def list_users(
    name: Optional[str] = None,
    email: Optional[str] = None,
    address: Optional[str] = None,
    role: Optional[Role] = None,
    sort: str = "name",
    order: str = "asc",
) -> List[User]:
    """Users filtered by case-insensitive substrings and role, sorted by one column."""
    if sort not in _USER_SORT_KEYS:
        raise ValidationError(f"Unsupported sort field: {sort}", code="INVALID_SORT")
    if order not in SORT_ORDERS:
        raise ValidationError(f"Unsupported sort order: {order}", code="INVALID_ORDER")

    qs = User.all()
    if name:
        qs = qs.filter(name__icontains=name)
    if email:
        qs = qs.filter(email__icontains=email)
    if address:
        qs = qs.filter(address__icontains=address)
    if role is not None:
        qs = qs.filter(role=Role(role))
    users = await qs.order_by("id")
    users.sort(key=_USER_SORT_KEYS[sort], reverse=(order == "desc"))
    return users


async def list_store_owners() -> List[User]:
    return await User.filter(role=Role.STORE_OWNER).order_by("name", "id")
