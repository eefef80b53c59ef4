# storerating/api/v1/routers/admin.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from storerating.api.v1.deps import require_admin
from storerating.core.security import Role
from storerating.schemas.admin import AdminUserCreateIn, UserSortField
from storerating.schemas.rating import DashboardStatsOut
from storerating.schemas.store import (
    AdminStoreCreateIn,
    SortOrder,
    StoreListOut,
    StoreOut,
    StoreSortField,
    store_to_dict,
    store_with_rating_to_dict,
)
from storerating.schemas.user import UserListOut, UserOut, user_to_dict
from storerating.services import dashboard, directory, ratings

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# ==============================================================================
# I. Platform statistics
# ==============================================================================
@router.get("/stats", response_model=DashboardStatsOut)
async def get_stats():
    """Total users, stores and ratings on the platform (admin only)."""
    stats = await dashboard.admin_stats()
    return {
        "totalUsers": stats.total_users,
        "totalStores": stats.total_stores,
        "totalRatings": stats.total_ratings,
    }


# ==============================================================================
# II. User management
#     Prefix: /api/admin/users, /api/admin/store-owners
# ==============================================================================
@router.get("/users", response_model=UserListOut)
async def list_users(
    name: Optional[str] = Query(default=None, description="Substring match on name"),
    email: Optional[str] = Query(default=None, description="Substring match on email"),
    address: Optional[str] = Query(default=None, description="Substring match on address"),
    role: Optional[Role] = Query(default=None),
    sort: UserSortField = Query(default="name"),
    order: SortOrder = Query(default="asc"),
):
    """
    List users with optional filters (admin only).

    Returns:
        UserListOut: {"items": [...], "total": int}
    """
    users = await directory.list_users(
        name=name, email=email, address=address, role=role, sort=sort, order=order,
    )
    return {"items": [user_to_dict(u) for u in users], "total": len(users)}


@router.post("/users", response_model=UserOut)
async def create_user(body: AdminUserCreateIn):
    """
    Create an account with any role (admin only).

    Error codes:
        - EMAIL_EXISTS (400): Email already registered
    """
    user = await directory.create_user(
        name=body.name,
        email=str(body.email),
        password=body.password,
        address=body.address,
        role=body.role,
    )
    return user_to_dict(user)


@router.get("/store-owners", response_model=list[UserOut])
async def list_store_owners():
    """Users with role store_owner, for the store creation form (admin only)."""
    return [user_to_dict(u) for u in await directory.list_store_owners()]


# ==============================================================================
# III. Store management
#     Prefix: /api/admin/stores
# ==============================================================================
@router.get("/stores", response_model=StoreListOut)
async def list_stores(
    name: Optional[str] = Query(default=None),
    email: Optional[str] = Query(default=None),
    address: Optional[str] = Query(default=None),
    sort: StoreSortField = Query(default="name"),
    order: SortOrder = Query(default="asc"),
):
    """All stores with average rating and rating count (admin only)."""
    entries = await ratings.list_stores_with_ratings(
        name=name, email=email, address=address, sort=sort, order=order,
    )
    return {"items": [store_with_rating_to_dict(e) for e in entries], "total": len(entries)}


@router.post("/stores", response_model=StoreOut)
async def create_store(body: AdminStoreCreateIn):
    """
    Create a store for a store owner (admin only).

    Error codes:
        - OWNER_NOT_FOUND (404)
        - OWNER_NOT_STORE_OWNER (400)
        - OWNER_HAS_STORE (400): The owner already has a store
        - STORE_EMAIL_EXISTS (400)
    """
    store = await directory.create_store(
        name=body.name,
        email=str(body.email),
        address=body.address,
        owner_id=body.ownerId,
    )
    return store_to_dict(store)
