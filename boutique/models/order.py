# boutique/models/order.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field

# Every order starts here; no transitions exist yet.
INITIAL_ORDER_STATUS = "Processing"


class Order(SQLModel, table=True):
    """
    Customer order.

    `details` is the checkout payload exactly as the client sent it:
    the `products` snapshot plus shipping/contact/totals. The backend only
    guarantees `products` is a non-empty list.
    """

    __tablename__ = "orders"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    user_id: uuid.UUID = Field(
        foreign_key="users.id",
        index=True,
    )

    details: dict[str, Any] = Field(
        sa_column=Column(JSON, nullable=False),
        description="Opaque order payload (products snapshot, shipping, ...)",
    )

    status: str = Field(
        default=INITIAL_ORDER_STATUS,
        index=True,
        description="Order status",
    )

    order_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Placement timestamp (UTC)",
    )
