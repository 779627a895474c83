# boutique/services/order_service.py
import logging
import uuid

from sqlmodel import Session

from boutique.core.errors import ValidationError
from boutique.models.order import INITIAL_ORDER_STATUS, Order
from boutique.repositories.order_repo import OrderRepository
from boutique.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business logic for orders.

    Orders are snapshots sent by the client at checkout; the backend does
    not price or re-validate products. It only scopes them to the caller.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def place_order(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: OrderCreate,
    ) -> Order:
        """
        Store the checkout payload as a new order with status 'Processing'.

        Raises:
            ValidationError (400): if `products` is missing or empty.
        """
        if not payload.products:
            logger.warning(f"Order from user {user_id} has no products")
            raise ValidationError("Order data is incomplete or empty.")

        order = Order(
            user_id=user_id,
            details=payload.model_dump(mode="json"),
            status=INITIAL_ORDER_STATUS,
        )
        order = self.order_repo.create(session, order)
        logger.info(f"Order placed with ID: {order.id}")
        return order

    def list_orders(self, session: Session, user_id: uuid.UUID) -> list[Order]:
        return self.order_repo.list_for_user(session, user_id)
