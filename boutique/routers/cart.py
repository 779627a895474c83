# boutique/routers/cart.py
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from boutique.core.auth import require_auth
from boutique.database import get_session
from boutique.models.user import User
from boutique.repositories.cart_repo import CartRepository
from boutique.schemas.cart import CartLineCreate, CartLineRead
from boutique.schemas.common import MessageResponse
from boutique.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Cart"])

cart_repo = CartRepository()
service = CartService(cart_repo)


@router.get("", response_model=list[CartLineRead])
def get_my_cart(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """List the current user's cart lines."""
    return service.list_lines(session, current_user.id)


@router.post(
    "",
    response_model=CartLineRead,
    status_code=status.HTTP_201_CREATED,
)
def add_to_cart(
    payload: CartLineCreate,
    response: Response,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Add a product/size to the current user's cart.

    201 with the new line, or 200 with the merged line when the same
    product and size were already in the cart.
    """
    line, created = service.add_line(session, current_user.id, payload)
    if not created:
        response.status_code = status.HTTP_200_OK
    return line


@router.delete("/{item_id}", response_model=MessageResponse)
def remove_cart_item(
    item_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Remove a cart line by its id.

    404 both when the line does not exist and when it belongs to someone else.
    """
    service.remove_line(session, current_user.id, item_id)
    return MessageResponse(message="Item removed from cart")
