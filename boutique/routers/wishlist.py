# boutique/routers/wishlist.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from boutique.core.auth import require_auth
from boutique.database import get_session
from boutique.models.user import User
from boutique.repositories.wishlist_repo import WishlistRepository
from boutique.schemas.common import MessageResponse
from boutique.schemas.wishlist import WishlistEntryCreate, WishlistEntryRead
from boutique.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["Wishlist"])

repo = WishlistRepository()
service = WishlistService(repo)


@router.get("", response_model=list[WishlistEntryRead])
def get_my_wishlist(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    return service.list_entries(session, current_user.id)


@router.post(
    "",
    response_model=WishlistEntryRead,
    status_code=status.HTTP_201_CREATED,
)
def add_to_wishlist(
    payload: WishlistEntryCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """Save a product. 409 if it is already in the wishlist."""
    return service.add_entry(session, current_user.id, payload)


@router.delete("/{product_id}", response_model=MessageResponse)
def remove_from_wishlist(
    product_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """Remove the entry for a product (by product id, not entry id)."""
    service.remove_entry(session, current_user.id, product_id)
    return MessageResponse(message="Item removed from wishlist")
