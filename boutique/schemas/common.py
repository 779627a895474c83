# boutique/schemas/common.py
import uuid

from sqlmodel import SQLModel


class MessageResponse(SQLModel):
    """Plain acknowledgement, e.g. after a delete."""

    message: str


class AccountRef(SQLModel):
    """Minimal account identity returned by signup and the password check."""

    id: uuid.UUID
    email: str


class AccountMessage(MessageResponse):
    user: AccountRef
