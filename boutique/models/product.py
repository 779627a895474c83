# boutique/models/product.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Catalog entry (a dress).

    Read-only from the HTTP surface; rows are loaded with seed_catalog.py.
    Anything beyond name/price/sizes/images lives in `attributes`.
    """

    __tablename__ = "dresses"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=200,
        index=True,
        description="Display name of the dress",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    price: float = Field(
        ge=0,
        description="Unit price",
    )

    sizes: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Available sizes, e.g. ['S', 'M', 'L']",
    )

    images: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Image URLs, hero image first",
    )

    attributes: dict[str, Any] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
        description="Opaque extra attributes (color, fabric, ...)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
