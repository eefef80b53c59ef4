# storerating/models/rating.py
import datetime as dt
from typing import Optional

from tortoise import fields, models, timezone


class Rating(models.Model):
    """
    A user's star rating (1..5) for a store.
    - user: the rater (role user)
    - store: the rated store
    - value: integer 1..5
    - created_at: first submission time, never changed afterwards
    - updated_at: last submission time
    One row per (user, store); later submissions update the row in place.
    """
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="ratings", on_delete=fields.RESTRICT)
    store = fields.ForeignKeyField("models.Store", related_name="ratings", on_delete=fields.RESTRICT)
    value = fields.SmallIntField()

    # Set explicitly by the rating service so both timestamps match on insert
    created_at = fields.DatetimeField()
    updated_at = fields.DatetimeField()

    class Meta:
        table = "ratings"
        unique_together = (("user", "store"),)

    user_id: int
    store_id: int

    def touch(self, value: int, now: Optional[dt.datetime] = None) -> None:
        """Replace the value and refresh updated_at; id and created_at stay as they are."""
        self.value = value
        self.updated_at = now or timezone.now()
