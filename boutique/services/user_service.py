# boutique/services/user_service.py
import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from boutique.core.credentials import encode_secret
from boutique.core.errors import ConflictError, NotFoundError
from boutique.models.user import User
from boutique.repositories.user_repo import UserRepository
from boutique.schemas.user import UserCreate, UserProfileRead, UserProfileUpdate

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic for accounts.

    Responsibilities:
      - signup with a unique email
      - self profile read/update for the authenticated user
      - map unique-index violations to ConflictError
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def signup(self, session: Session, payload: UserCreate) -> User:
        """
        Create an account.

        Email uniqueness is enforced by the unique index, so two concurrent
        signups with the same email cannot both succeed.

        Raises:
            ConflictError (409): if the email is already registered.
        """
        user = User(
            email=payload.email,
            encoded_password=encode_secret(payload.password),
            name=payload.name,
            gender=payload.gender or None,
            phone_number=payload.phone_number or None,
        )
        try:
            user = self.repo.create(session, user)
        except IntegrityError:
            logger.warning(f"Signup rejected: email already registered {payload.email!r}")
            raise ConflictError("User with this email already exists")

        logger.info(f"New user created with ID: {user.id}")
        return user

    # ----- Self profile -----

    def get_profile(self, current_user: User) -> UserProfileRead:
        return UserProfileRead.model_validate(current_user, from_attributes=True)

    def update_profile(
        self,
        session: Session,
        current_user: User,
        payload: UserProfileUpdate,
    ) -> UserProfileRead:
        """
        Replace the editable profile fields of the authenticated user.

        Raises:
            NotFoundError (404): if the account disappeared mid-request.
            ConflictError (409): if the new email belongs to another account.
        """
        user_id: uuid.UUID = current_user.id
        values = {
            "name": payload.name if payload.name is not None else current_user.name,
            "email": payload.email if payload.email is not None else current_user.email,
            "gender": payload.gender or None,
            "phone_number": payload.phone_number or None,
            "updated_at": datetime.now(timezone.utc),
        }

        try:
            matched = self.repo.update_fields(session, user_id, values)
        except IntegrityError:
            logger.warning(f"Profile update rejected for {user_id}: email in use")
            raise ConflictError("User with this email already exists")

        if matched == 0:
            logger.warning(f"Profile update: user {user_id} not found")
            raise NotFoundError("User not found")

        # Objects are expired after commit; this reloads the updated row.
        updated = self.repo.get_by_id(session, user_id)
        if updated is None:
            raise NotFoundError("User not found")

        logger.info(f"Profile updated for ID: {user_id}")
        return self.get_profile(updated)
