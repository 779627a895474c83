# boutique/schemas/cart.py
import uuid
from datetime import datetime

from pydantic import field_validator
from sqlmodel import SQLModel, Field

from boutique.models.cart import MAX_LINE_QUANTITY


class CartLineCreate(SQLModel):
    """
    Payload for adding to cart.

    product_id stays a string here; the service checks its format so the
    caller gets "Invalid productId format" rather than a generic error.
    """

    product_id: str
    size: str = Field(min_length=1, max_length=20)
    quantity: int = Field(ge=1, le=MAX_LINE_QUANTITY)

    @field_validator("size")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("size cannot be empty")
        return v


class CartLineRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    product_id: uuid.UUID
    size: str
    quantity: int
    added_at: datetime
