# storerating/services/dashboard.py
"""
Dashboard summaries: platform-wide counts for admins, and the rating
overview of the store a store owner runs.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from storerating.models.rating import Rating
from storerating.models.store import Store
from storerating.models.user import User
from .ratings import RatingWithUser, get_aggregate_for_store, list_ratings_for_store


@dataclass
class DashboardStats:
    total_users: int
    total_stores: int
    total_ratings: int


@dataclass
class OwnerDashboard:
    average_rating: float = 0.0
    total_ratings: int = 0
    ratings: List[RatingWithUser] = field(default_factory=list)
    store: Optional[Store] = None


async def admin_stats() -> DashboardStats:
    return DashboardStats(
        total_users=await User.all().count(),
        total_stores=await Store.all().count(),
        total_ratings=await Rating.all().count(),
    )


async def owner_dashboard(owner_id: int) -> OwnerDashboard:
    """
    Aggregate and rating list for the store owned by owner_id.
    An owner without a store gets zeros and an empty list rather than an error.
    """
    store = await Store.get_or_none(owner_id=owner_id)
    if store is None:
        return OwnerDashboard()
    aggregate = await get_aggregate_for_store(store.id)
    return OwnerDashboard(
        average_rating=aggregate.average_rating,
        total_ratings=aggregate.total_ratings,
        ratings=await list_ratings_for_store(store.id),
        store=store,
    )
