# boutique/routers/users.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from boutique.core.auth import require_auth
from boutique.database import get_session
from boutique.models.user import User
from boutique.repositories.user_repo import UserRepository
from boutique.schemas.common import AccountMessage, AccountRef
from boutique.schemas.user import (
    UserCreate,
    UserProfileRead,
    UserProfileUpdate,
    UserProfileUpdated,
)
from boutique.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

repo = UserRepository()
service = UserService(repo)


@router.post(
    "",
    response_model=AccountMessage,
    status_code=status.HTTP_201_CREATED,
)
def sign_up(
    payload: UserCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new account (public).

    The client then sends `Authorization: Basic base64(email:password)`
    on every authenticated request; there is no token.
    """
    user = service.signup(session, payload)
    return AccountMessage(
        message="User created successfully",
        user=AccountRef(id=user.id, email=user.email),
    )


# -------- Self profile --------


@router.get("/profile", response_model=UserProfileRead)
def read_profile(current_user: User = Depends(require_auth)):
    """Return the authenticated user's profile."""
    return service.get_profile(current_user)


@router.put("/profile", response_model=UserProfileUpdated)
def update_profile(
    payload: UserProfileUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Replace the authenticated user's profile fields.

    Changing `email` changes the login identifier: subsequent requests
    must use the new email.
    """
    profile = service.update_profile(session, current_user, payload)
    return UserProfileUpdated(message="Profile updated successfully", profile=profile)
