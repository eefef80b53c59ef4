# storerating/schemas/validators.py
"""
Field rules shared by request schemas.
Store names reuse the user name rule; passwords follow the signup policy.
"""
from typing import Annotated

from pydantic import AfterValidator

NAME_MIN_LENGTH = 20
NAME_MAX_LENGTH = 60
ADDRESS_MAX_LENGTH = 400
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 16
PASSWORD_SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
RATING_MIN = 1
RATING_MAX = 5


def validate_name(value: str) -> str:
    if len(value) < NAME_MIN_LENGTH:
        raise ValueError(f"Name must be at least {NAME_MIN_LENGTH} characters")
    if len(value) > NAME_MAX_LENGTH:
        raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters")
    return value


def validate_address(value: str) -> str:
    if len(value) > ADDRESS_MAX_LENGTH:
        raise ValueError(f"Address must be at most {ADDRESS_MAX_LENGTH} characters")
    return value


def validate_password(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    if len(value) > PASSWORD_MAX_LENGTH:
        raise ValueError(f"Password must be at most {PASSWORD_MAX_LENGTH} characters")
    if not any(ch.isupper() for ch in value):
        raise ValueError("Password must contain at least one uppercase letter")
    if not any(ch in PASSWORD_SPECIAL_CHARACTERS for ch in value):
        raise ValueError("Password must contain at least one special character")
    return value


def is_valid_rating_value(value: object) -> bool:
    """True for plain integers 1..5 (bool is rejected even though it subclasses int)."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and RATING_MIN <= value <= RATING_MAX
    )


Name = Annotated[str, AfterValidator(validate_name)]
Address = Annotated[str, AfterValidator(validate_address)]
Password = Annotated[str, AfterValidator(validate_password)]
