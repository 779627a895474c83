# boutique/services/cart_service.py
import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from boutique.core.errors import ConflictError, NotFoundOrUnauthorized, ValidationError
from boutique.core.ids import parse_record_id
from boutique.models.cart import MAX_LINE_QUANTITY, CartLine
from boutique.repositories.cart_repo import CartRepository, QuantityLimitExceeded
from boutique.schemas.cart import CartLineCreate

logger = logging.getLogger(__name__)


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - every read/write is scoped to the authenticated user's id
      - one line per (user, product, size); repeated adds merge quantities
      - deleting someone else's line looks exactly like deleting a missing one
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    def list_lines(self, session: Session, user_id: uuid.UUID) -> list[CartLine]:
        lines = self.cart_repo.list_for_user(session, user_id)
        logger.info(f"Retrieved {len(lines)} cart items for user {user_id}")
        return lines

    def add_line(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: CartLineCreate,
    ) -> tuple[CartLine, bool]:
        """
        Add a product/size to the user's cart, merging with an existing line.

        Returns:
            (line, created): created is False when quantity was added to an
            existing line.

        Raises:
            InvalidIdentifierFormat (400): if product_id is not a UUID.
            ValidationError (400): if the merged quantity would exceed
                MAX_LINE_QUANTITY.
            ConflictError (409): if concurrent adds kept colliding.
        """
        product_id = parse_record_id(payload.product_id, "productId")

        try:
            line, created = self.cart_repo.merge_line(
                session,
                user_id=user_id,
                product_id=product_id,
                size=payload.size,
                quantity=payload.quantity,
            )
        except QuantityLimitExceeded:
            raise ValidationError(f"Cart quantity cannot exceed {MAX_LINE_QUANTITY}")
        except IntegrityError:
            logger.warning(f"Cart merge for user {user_id} kept conflicting")
            raise ConflictError("Cart item is being updated concurrently, retry")

        if created:
            logger.info(f"Added new cart item ID: {line.id}")
        else:
            logger.info(f"Updated quantity for cart item ID: {line.id}")
        return line, created

    def remove_line(self, session: Session, user_id: uuid.UUID, raw_line_id: str) -> None:
        """
        Remove one of the user's cart lines by its id.

        Raises:
            InvalidIdentifierFormat (400): if the id is not a UUID.
            NotFoundOrUnauthorized (404): if missing or owned by another user.
        """
        line_id = parse_record_id(raw_line_id, "Cart Item ID")
        deleted = self.cart_repo.delete_owned(session, user_id, line_id)
        if deleted == 0:
            logger.warning(f"Cart item {line_id} not found or unauthorized")
            raise NotFoundOrUnauthorized("Cart item not found or does not belong to user")
        logger.info(f"Cart item {line_id} removed")
