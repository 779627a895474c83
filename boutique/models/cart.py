# boutique/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field

# Largest quantity a single cart line may hold.
MAX_LINE_QUANTITY = 99


class CartLine(SQLModel, table=True):
    """
    Shopping cart entry for a user.
    One user cannot have 2 rows for the same (product, size); adding the
    same combination again increments `quantity`.
    """

    __tablename__ = "cart_lines"
    __table_args__ = (
        UniqueConstraint(
            "user_id", "product_id", "size", name="uq_cart_lines_user_product_size"
        ),
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

    # Not a foreign key: carts may reference dresses that were since removed.
    product_id: uuid.UUID = Field(index=True)

    size: str = Field(max_length=20)

    quantity: int = Field(
        gt=0,
        le=MAX_LINE_QUANTITY,
        description=f"Between 1 and {MAX_LINE_QUANTITY}",
    )

    added_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
