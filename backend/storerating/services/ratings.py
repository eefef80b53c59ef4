# storerating/services/ratings.py
"""
Rating Aggregator

Core features:
1. Per-store aggregate (average, count), computed by the database
2. Upsert of a user's rating for a store (one row per user/store pair)
3. Per-store rating listing with rater details, newest first
4. Store listings that embed the aggregate and the viewer's own rating
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from tortoise import timezone
from tortoise.exceptions import IntegrityError
from tortoise.functions import Avg, Count

from storerating.core.errors import NotFound, ValidationError
from storerating.models.rating import Rating
from storerating.models.store import Store
from storerating.schemas.validators import RATING_MAX, RATING_MIN, is_valid_rating_value

logger = logging.getLogger("uvicorn.error")

SORT_ORDERS = ("asc", "desc")


@dataclass
class RatingAggregate:
    """Average and count of a store's ratings; (0.0, 0) when the store has none."""
    average_rating: float
    total_ratings: int


@dataclass
class StoreWithRating:
    store: Store
    average_rating: float
    total_ratings: int
    user_rating: Optional[int] = None  # Viewer's own rating, if a viewer was given and has rated


@dataclass
class RatingWithUser:
    rating: Rating
    rater_name: str
    rater_email: str


def _aggregate(average, total) -> RatingAggregate:
    """
    Normalize raw AVG/COUNT results.
    AVG over zero rows is NULL, and PostgreSQL returns Decimal; both become float here.
    """
    total = int(total or 0)
    if total == 0 or average is None:
        return RatingAggregate(average_rating=0.0, total_ratings=0)
    return RatingAggregate(average_rating=float(average), total_ratings=total)


def _with_aggregates(queryset):
    # LEFT JOIN ratings grouped by store: stores without ratings keep a row with NULL/0
    return queryset.annotate(
        average_rating=Avg("ratings__value"),
        total_ratings=Count("ratings__id"),
    )


async def get_aggregate_for_store(store_id: int) -> RatingAggregate:
    """
    Average and count of all ratings for a store.

    A store without ratings (or an unknown store id) yields average 0 and count 0.
    """
    store = await _with_aggregates(Store.filter(id=store_id)).first()
    if store is None:
        return RatingAggregate(average_rating=0.0, total_ratings=0)
    return _aggregate(store.average_rating, store.total_ratings)


async def get_user_rating_for_store(user_id: int, store_id: int) -> Optional[int]:
    """The value this user gave this store, or None if they have not rated it."""
    rating = await Rating.get_or_none(user_id=user_id, store_id=store_id)
    return rating.value if rating else None


async def upsert_rating(user_id: int, store_id: int, value: int) -> Rating:
    """
    Create or update the user's rating for a store.

    - value must be an integer 1..5, otherwise ValidationError (nothing is written)
    - unknown store -> NotFound
    - existing row: value and updated_at change, id and created_at do not
    - no row: insert with created_at == updated_at == now

    The (user, store) unique constraint decides concurrent first submissions:
    the losing insert raises IntegrityError and falls through to the update path.
    """
    if not is_valid_rating_value(value):
        raise ValidationError(
            f"Rating must be an integer between {RATING_MIN} and {RATING_MAX}",
            code="RATING_OUT_OF_RANGE",
        )
    if not await Store.filter(id=store_id).exists():
        raise NotFound("Store not found", code="STORE_NOT_FOUND")

    now = timezone.now()
    rating = await Rating.get_or_none(user_id=user_id, store_id=store_id)
    if rating is None:
        try:
            rating = await Rating.create(
                user_id=user_id,
                store_id=store_id,
                value=value,
                created_at=now,
                updated_at=now,
            )
            logger.info("[ratings] created rating id=%s user=%s store=%s value=%s",
                        rating.id, user_id, store_id, value)
            return rating
        except IntegrityError:
            logger.info("[ratings] concurrent insert for user=%s store=%s, updating instead",
                        user_id, store_id)
            rating = await Rating.get(user_id=user_id, store_id=store_id)

    rating.touch(value, now)
    await rating.save(update_fields=["value", "updated_at"])
    logger.info("[ratings] updated rating id=%s user=%s store=%s value=%s",
                rating.id, user_id, store_id, value)
    return rating


async def list_ratings_for_store(store_id: int) -> List[RatingWithUser]:
    """All ratings of a store with rater name/email, most recently created first."""
    rows = await (
        Rating.filter(store_id=store_id)
        .prefetch_related("user")
        .order_by("-created_at", "-id")
    )
    return [RatingWithUser(rating=r, rater_name=r.user.name, rater_email=r.user.email) for r in rows]


_STORE_SORT_KEYS = {
    "name": lambda e: e.store.name.lower(),
    "email": lambda e: e.store.email.lower(),
    "address": lambda e: e.store.address.lower(),
    "averageRating": lambda e: e.average_rating,
}


async def list_stores_with_ratings(
    viewer_id: Optional[int] = None,
    name: Optional[str] = None,
    email: Optional[str] = None,
    address: Optional[str] = None,
    sort: str = "name",
    order: str = "asc",
) -> List[StoreWithRating]:
    """
    Stores with their aggregates, optionally filtered and sorted.

    Args:
        viewer_id: When given, each entry carries this user's own rating (or None)
        name/email/address: Case-insensitive substring filters
        sort: One of name, email, address, averageRating
        order: asc or desc
    """
    if sort not in _STORE_SORT_KEYS:
        raise ValidationError(f"Unsupported sort field: {sort}", code="INVALID_SORT")
    if order not in SORT_ORDERS:
        raise ValidationError(f"Unsupported sort order: {order}", code="INVALID_ORDER")

    qs = Store.all()
    if name:
        qs = qs.filter(name__icontains=name)
    if email:
        qs = qs.filter(email__icontains=email)
    if address:
        qs = qs.filter(address__icontains=address)
    stores = await _with_aggregates(qs)

    own: Dict[int, int] = {}
    if viewer_id is not None:
        rows = await Rating.filter(user_id=viewer_id).values_list("store_id", "value")
        own = {store_id: value for store_id, value in rows}

    entries = []
    for s in stores:
        agg = _aggregate(s.average_rating, s.total_ratings)
        entries.append(StoreWithRating(
            store=s,
            average_rating=agg.average_rating,
            total_ratings=agg.total_ratings,
            user_rating=own.get(s.id),
        ))

    # Stable sort: id first so equal keys keep creation order
    entries.sort(key=lambda e: e.store.id)
    entries.sort(key=_STORE_SORT_KEYS[sort], reverse=(order == "desc"))
    return entries
