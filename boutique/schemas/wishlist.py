# boutique/schemas/wishlist.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel


class WishlistEntryCreate(SQLModel):
    product_id: str


class WishlistEntryRead(SQLModel):
    id: uuid.UUID
    user_id: uuid.UUID
    product_id: uuid.UUID
    added_at: datetime
