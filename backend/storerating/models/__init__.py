# storerating/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: Account, credentials and role
- Store: A rateable store owned by a store owner
- Rating: One user's 1-5 rating of one store
"""
from .user import User
from .store import Store
from .rating import Rating
