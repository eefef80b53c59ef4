# storerating/api/v1/routers/ratings.py
from fastapi import APIRouter, Depends

from storerating.api.v1.deps import require_shopper
from storerating.schemas.auth import Principal
from storerating.schemas.rating import RatingIn, RatingOut, rating_to_dict
from storerating.services.ratings import upsert_rating

router = APIRouter(prefix="/ratings", tags=["ratings"])


@router.post("", response_model=RatingOut)
async def submit_rating(body: RatingIn, user: Principal = Depends(require_shopper)):
    """
    Submit or change the caller's rating for a store (role user only).

    The first submission creates the rating; later submissions for the
    same store replace its value and keep its id and createdAt.

    Error codes:
        - VALIDATION_ERROR / RATING_OUT_OF_RANGE (400): rating not an integer 1-5
        - STORE_NOT_FOUND (404)
    """
    rating = await upsert_rating(user.id, body.storeId, body.rating)
    return rating_to_dict(rating)
