# boutique/schemas/product.py
import uuid
from datetime import datetime
from typing import Any

from pydantic import model_validator
from sqlmodel import SQLModel, Field


class ProductRead(SQLModel):
    """Public representation of a catalog entry."""

    id: uuid.UUID
    name: str
    description: str | None
    price: float
    sizes: list[str]
    images: list[str]
    attributes: dict[str, Any]
    created_at: datetime


class ProductSeed(SQLModel):
    """
    One entry of a catalog seed file (see seed_catalog.py).
    Unknown keys are folded into `attributes`.
    """

    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    price: float = Field(ge=0)
    sizes: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def collect_extra_attributes(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = set(cls.model_fields)
        extra = {k: v for k, v in data.items() if k not in known}
        if not extra:
            return data
        cleaned = {k: v for k, v in data.items() if k in known}
        cleaned["attributes"] = {**extra, **(data.get("attributes") or {})}
        return cleaned
