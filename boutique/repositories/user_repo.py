# boutique/repositories/user_repo.py
import uuid
from typing import Any

from sqlalchemy import update
from sqlmodel import Session, select

from boutique.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic

    Unique-index violations surface as sqlalchemy IntegrityError; the
    service decides what they mean.
    """

    # ----- Lookups -----

    def get_by_id(self, session: Session, user_id: uuid.UUID) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def get_by_email(self, session: Session, email: str) -> User | None:
        """Return a User by exact email match, or None if not found."""
        stmt = select(User).where(User.email == email)
        return session.exec(stmt).first()

    # ----- Writes -----

    def create(self, session: Session, user: User) -> User:
        """Insert a new User and return the persisted row."""
        session.add(user)
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise
        session.refresh(user)
        return user

    def update_fields(
        self,
        session: Session,
        user_id: uuid.UUID,
        values: dict[str, Any],
    ) -> int:
        """
        Apply `values` to the row in one UPDATE.

        Returns:
            Number of matched rows (0 if the user no longer exists).
        """
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            matched = session.exec(stmt).rowcount
            session.commit()
        except Exception:
            session.rollback()
            raise
        return matched
