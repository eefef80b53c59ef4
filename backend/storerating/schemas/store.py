# storerating/schemas/store.py
"""
Pydantic schemas for store endpoints.
Defines the admin create model and the store payloads with rating aggregates.
"""
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from .validators import Address, Name

StoreSortField = Literal["name", "email", "address", "averageRating"]
SortOrder = Literal["asc", "desc"]


class AdminStoreCreateIn(BaseModel):
    """Request model for admin store creation. The owner must be a store_owner without a store."""
    name: Name  # Same 20-60 character rule as user names
    email: EmailStr
    address: Address
    ownerId: int = Field(strict=True, ge=1)


class StoreOut(BaseModel):
    id: int
    name: str
    email: str
    address: str
    ownerId: int
    createdAt: Optional[str] = None


class StoreWithRatingOut(StoreOut):
    """
    Store with its rating aggregate.
    userRating is the requesting shopper's own rating (None if not rated or not asked for).
    """
    averageRating: float
    totalRatings: int
    userRating: Optional[int] = None


class StoreListOut(BaseModel):
    items: List[StoreWithRatingOut]
    total: int


def store_to_dict(s: Any) -> dict:
    return {
        "id": s.id,
        "name": s.name,
        "email": s.email,
        "address": s.address,
        "ownerId": s.owner_id,
        "createdAt": s.created_at.isoformat() if s.created_at else None,
    }


def store_with_rating_to_dict(entry: Any) -> dict:
    """Flatten a StoreWithRating (store + aggregate + viewer rating) into one payload."""
    data = store_to_dict(entry.store)
    data.update(
        averageRating=entry.average_rating,
        totalRatings=entry.total_ratings,
        userRating=entry.user_rating,
    )
    return data
