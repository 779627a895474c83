# boutique/routers/orders.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from boutique.core.auth import require_auth
from boutique.database import get_session
from boutique.models.user import User
from boutique.repositories.order_repo import OrderRepository
from boutique.schemas.order import OrderCreate, OrderRead
from boutique.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

order_repo = OrderRepository()
service = OrderService(order_repo)


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
)
def place_order(
    payload: OrderCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Place an order from a checkout payload.

    The body must contain a non-empty `products` list; other keys
    (shipping, totals, ...) are stored as sent.
    """
    return service.place_order(session, current_user.id, payload)


@router.get("", response_model=list[OrderRead])
def list_my_orders(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """List the authenticated user's orders, newest first."""
    return service.list_orders(session, current_user.id)
