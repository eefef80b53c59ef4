# storerating/schemas/rating.py
"""
Pydantic schemas for rating submission and the dashboards that read ratings.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .store import StoreOut, store_to_dict
from .validators import RATING_MAX, RATING_MIN


class RatingIn(BaseModel):
    """
    A shopper's rating for one store; resubmitting replaces the previous value.
    Both fields are strict: JSON booleans, numeric strings and floats are rejected.
    """
    storeId: int = Field(strict=True, ge=1)
    rating: int = Field(strict=True, ge=RATING_MIN, le=RATING_MAX)


class RatingOut(BaseModel):
    id: int
    userId: int
    storeId: int
    rating: int
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class RaterOut(BaseModel):
    name: str
    email: str


class RatingWithUserOut(RatingOut):
    user: RaterOut


class OwnerDashboardOut(BaseModel):
    """Aggregate and rating list for the owner's store (zeros and an empty list when no store)."""
    store: Optional[StoreOut] = None
    averageRating: float
    totalRatings: int
    ratings: List[RatingWithUserOut]


class DashboardStatsOut(BaseModel):
    totalUsers: int
    totalStores: int
    totalRatings: int


def rating_to_dict(r: Any) -> dict:
    return {
        "id": r.id,
        "userId": r.user_id,
        "storeId": r.store_id,
        "rating": r.value,
        "createdAt": r.created_at.isoformat() if r.created_at else None,
        "updatedAt": r.updated_at.isoformat() if r.updated_at else None,
    }


def rating_with_user_to_dict(entry: Any) -> dict:
    data = rating_to_dict(entry.rating)
    data["user"] = {"name": entry.rater_name, "email": entry.rater_email}
    return data


def owner_dashboard_to_dict(dashboard: Any) -> dict:
    return {
        "store": store_to_dict(dashboard.store) if dashboard.store else None,
        "averageRating": dashboard.average_rating,
        "totalRatings": dashboard.total_ratings,
        "ratings": [rating_with_user_to_dict(r) for r in dashboard.ratings],
    }
