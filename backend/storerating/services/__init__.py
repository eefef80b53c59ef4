"""
Services Module

Domain operations used by the API routers:
- ratings: rating aggregation, upsert and store listings with aggregates
- dashboard: admin statistics and the store owner dashboard
- directory: user/store creation and admin listings
"""
from .ratings import (
    RatingAggregate,
    RatingWithUser,
    StoreWithRating,
    get_aggregate_for_store,
    get_user_rating_for_store,
    list_ratings_for_store,
    list_stores_with_ratings,
    upsert_rating,
)
from .dashboard import (
    DashboardStats,
    OwnerDashboard,
    admin_stats,
    owner_dashboard,
)
from .directory import (
    create_store,
    create_user,
    list_store_owners,
    list_users,
)

__all__ = [
    # Ratings
    "RatingAggregate",
    "RatingWithUser",
    "StoreWithRating",
    "get_aggregate_for_store",
    "get_user_rating_for_store",
    "list_ratings_for_store",
    "list_stores_with_ratings",
    "upsert_rating",
    # Dashboards
    "DashboardStats",
    "OwnerDashboard",
    "admin_stats",
    "owner_dashboard",
    # Directory
    "create_store",
    "create_user",
    "list_store_owners",
    "list_users",
]
