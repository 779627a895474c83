# boutique/routers/auth.py
from fastapi import APIRouter, Depends

from boutique.core.auth import require_auth
from boutique.models.user import User
from boutique.schemas.common import AccountMessage, AccountRef

router = APIRouter(tags=["Auth"])


@router.api_route(
    "/checkpassword",
    methods=["GET", "POST"],
    response_model=AccountMessage,
)
def check_password(current_user: User = Depends(require_auth)):
    """
    Confirm that the Basic credentials are valid ("login").

    Nothing is issued: the frontend keeps sending the same header.
    """
    return AccountMessage(
        message="Login successful",
        user=AccountRef(id=current_user.id, email=current_user.email),
    )
