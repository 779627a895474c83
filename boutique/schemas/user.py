# boutique/schemas/user.py
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from boutique.schemas.common import MessageResponse


class UserCreate(SQLModel):
    """
    Signup payload.

    email is kept exactly as sent (no lowercasing); it is the login
    identifier for Basic authentication.
    """

    model_config = ConfigDict(extra="ignore")

    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1)
    name: str | None = Field(default=None, max_length=200)
    gender: str | None = None
    phone_number: str | None = None

    @field_validator("email")
    @classmethod
    def no_colon_in_email(cls, v: str) -> str:
        # The Basic header splits on the first ':'; such an email could never log in.
        if ":" in v:
            raise ValueError("email cannot contain ':'")
        return v

    @field_validator("password")
    @classmethod
    def no_trailing_whitespace(cls, v: str) -> str:
        # Login strips trailing whitespace from the supplied password.
        if v != v.rstrip():
            raise ValueError("password cannot end with whitespace")
        return v


class UserProfileRead(SQLModel):
    """Profile fields returned to the owner."""

    name: str | None
    email: str
    gender: str | None
    phone_number: str | None
    created_at: datetime
    updated_at: datetime


class UserProfileUpdate(SQLModel):
    """
    Full profile replacement (PUT).

    - name / email: keep the current value when omitted
    - gender / phone_number: replaced; omitted means cleared
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=200)
    email: str | None = Field(default=None, min_length=1, max_length=320)
    gender: str | None = None
    phone_number: str | None = None

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v

    @field_validator("email")
    @classmethod
    def no_colon_in_email(cls, v: str | None) -> str | None:
        if v is not None and ":" in v:
            raise ValueError("email cannot contain ':'")
        return v


class UserProfileUpdated(MessageResponse):
    profile: UserProfileRead
