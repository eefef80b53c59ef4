# storerating/models/store.py
"""
Database model for stores.
A store is listed by an administrator and belongs to exactly one store owner.
"""
from tortoise import fields, models

class Store(models.Model):
    """
    Store database model.

    Relationships:
    - Belongs to one User with role store_owner (one-to-one, so an owner holds at most one store)
    - Has many Ratings (one-to-many, via related_name="ratings")
    """
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=60)
    email = fields.CharField(max_length=255, unique=True, index=True)
    address = fields.CharField(max_length=400)
    owner = fields.OneToOneField(
        "models.User",
        related_name="store",
        on_delete=fields.RESTRICT,
    )  # Unique owner column closes the "two stores for one owner" race
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "stores"
