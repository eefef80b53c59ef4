# storerating/api/v1/routers/owner.py
from fastapi import APIRouter, Depends

from storerating.api.v1.deps import require_store_owner
from storerating.schemas.auth import Principal
from storerating.schemas.rating import OwnerDashboardOut, owner_dashboard_to_dict
from storerating.services.dashboard import owner_dashboard

router = APIRouter(prefix="/owner", tags=["owner"])


@router.get("/dashboard", response_model=OwnerDashboardOut)
async def get_dashboard(user: Principal = Depends(require_store_owner)):
    """
    Rating overview of the caller's store (role store_owner only).

    Returns:
        OwnerDashboardOut: store, averageRating, totalRatings and the ratings
        (newest first, with rater name and email). An owner without a store
        gets store=null, zeros and an empty list.
    """
    return owner_dashboard_to_dict(await owner_dashboard(user.id))
