# boutique/models/wishlist.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class WishlistEntry(SQLModel, table=True):
    """
    A product saved by a user. At most one entry per (user, product).
    """

    __tablename__ = "wishlist_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_wishlist_user_product"),
    )

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    product_id: uuid.UUID = Field(index=True)

    added_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
