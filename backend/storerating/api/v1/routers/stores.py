# storerating/api/v1/routers/stores.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from storerating.api.v1.deps import require_shopper
from storerating.schemas.auth import Principal
from storerating.schemas.store import StoreWithRatingOut, store_with_rating_to_dict
from storerating.services.ratings import list_stores_with_ratings

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("", response_model=list[StoreWithRatingOut])
async def list_stores(
    name: Optional[str] = Query(default=None, description="Substring match on store name"),
    address: Optional[str] = Query(default=None, description="Substring match on address"),
    user: Principal = Depends(require_shopper),
):
    """
    Browse stores (role user only).

    Each store carries its average rating, its rating count and the
    caller's own rating (userRating, null when not rated yet).
    """
    entries = await list_stores_with_ratings(viewer_id=user.id, name=name, address=address)
    return [store_with_rating_to_dict(e) for e in entries]
