# storerating/models/user.py
"""
Database model for users.
Represents an account in the system: profile fields, login credentials
and the role that decides which endpoints the account may use.
"""
from tortoise import fields, models

from storerating.core.security import Role

class User(models.Model):
    """
    User database model.

    Relationships:
    - Has at most one Store when role is store_owner (reverse of Store.owner, via related_name="store")
    - Has many Ratings (one-to-many, via related_name="ratings")

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all users
    - Role is fixed at creation; no endpoint changes it
    """
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=60)  # Display name (20-60 chars, validated at the API boundary)
    email = fields.CharField(max_length=255, unique=True, index=True)  # Login identifier
    password_hash = fields.CharField(max_length=255)  # Argon2 hash, never exposed past the access gate
    address = fields.CharField(max_length=400)
    role = fields.CharEnumField(Role, max_length=20, default=Role.USER)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"

    def __str__(self) -> str:
        return f"User({self.id}, {self.email}, {self.role.value})"
