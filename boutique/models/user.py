# boutique/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Customer account.

    Identity:
      - email: login identifier, unique, compared exactly as stored
        (no case folding or trimming).

    Credentials:
      - encoded_password: reversible encoding of the password
        (see boutique.core.credentials), checked on every request.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    email: str = Field(
        unique=True,
        index=True,
        description="Login identifier; unique across accounts",
    )

    encoded_password: str = Field(
        description="Base64-encoded password (reversible)",
    )

    # Display name, e.g. "name and surname"
    name: str | None = Field(
        default=None,
        max_length=200,
    )

    gender: str | None = None
    phone_number: str | None = None

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last profile update (UTC)",
    )
