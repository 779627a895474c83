# boutique/schemas/order.py
import uuid
from datetime import datetime
from typing import Any

from pydantic import ConfigDict
from sqlmodel import SQLModel


class OrderCreate(SQLModel):
    """
    Checkout payload.

    Only `products` is interpreted (must be a non-empty list, checked by
    the service). Every other key (shipping address, totals, contact...)
    is kept and stored verbatim.
    """

    model_config = ConfigDict(extra="allow")

    products: list[Any] | None = None


class OrderRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    details: dict[str, Any]
    status: str
    order_date: datetime
