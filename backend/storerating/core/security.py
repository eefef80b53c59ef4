# storerating/core/security.py
"""
Security module for authentication and authorization.
Handles password hashing, session token creation/validation, and the role set.
"""
import os
import datetime as dt
from enum import Enum

import jwt  # PyJWT
from passlib.context import CryptContext
from dotenv import load_dotenv
from pathlib import Path

# Load environment variables from project root
ENV_PATH = Path(__file__).resolve().parents[3] / ".env"
load_dotenv(dotenv_path=ENV_PATH)

# Password hashing context
# Argon2 only; the hash is treated as an opaque one-way function everywhere else
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

# JWT configuration
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret")  # Use a strong secret in production
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 30)))  # 30 days
JWT_ALG = "HS256"


class Role(str, Enum):
    """
    Closed set of account roles.

    - ADMIN: manages users and stores, sees platform statistics
    - USER: browses stores and submits ratings
    - STORE_OWNER: reads the feedback of the store they own
    """
    ADMIN = "admin"
    USER = "user"
    STORE_OWNER = "store_owner"


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)

def create_access_token(user_id: str, role: str) -> str:
    """
    Create the signed session token stored in the session cookie.

    Args:
        user_id: User identifier (stringified integer id)
        role: User role value at login time

    Returns:
        Encoded JWT token string

    Token payload includes:
        - sub: Subject (user ID)
        - role: Role at issue time (informational; authorization re-reads the database)
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """
    now = dt.datetime.now(dt.timezone.utc)
    payload = {
        "sub": user_id,
        "role": role,
        "iat": now,
        "exp": now + dt.timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALG)

def decode_access_token(token: str) -> dict:
    """
    Decode and validate a session token.

    Raises:
        jwt.ExpiredSignatureError: If token has expired
        jwt.InvalidTokenError: If token is invalid or malformed
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])
