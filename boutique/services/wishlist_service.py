# boutique/services/wishlist_service.py
import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from boutique.core.errors import DuplicateEntry, NotFoundOrUnauthorized
from boutique.core.ids import parse_record_id
from boutique.models.wishlist import WishlistEntry
from boutique.repositories.wishlist_repo import WishlistRepository
from boutique.schemas.wishlist import WishlistEntryCreate

logger = logging.getLogger(__name__)


class WishlistService:
    """
    Business logic for the wishlist.

    Unlike the cart there is no merge: adding a product twice is a conflict.
    """

    def __init__(self, repo: WishlistRepository):
        self.repo = repo

    def list_entries(self, session: Session, user_id: uuid.UUID) -> list[WishlistEntry]:
        return self.repo.list_for_user(session, user_id)

    def add_entry(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: WishlistEntryCreate,
    ) -> WishlistEntry:
        """
        Raises:
            InvalidIdentifierFormat (400): if product_id is not a UUID.
            DuplicateEntry (409): if the product is already in the wishlist.
        """
        product_id = parse_record_id(payload.product_id, "productId")
        try:
            entry = self.repo.create(
                session, WishlistEntry(user_id=user_id, product_id=product_id)
            )
        except IntegrityError:
            logger.warning(f"Wishlist item already exists for product: {product_id}")
            raise DuplicateEntry("Item already in wishlist")

        logger.info(f"Added new wishlist item ID: {entry.id}")
        return entry

    def remove_entry(self, session: Session, user_id: uuid.UUID, raw_product_id: str) -> None:
        """
        Remove the user's entry for a product.

        Raises:
            InvalidIdentifierFormat (400): if the product id is not a UUID.
            NotFoundOrUnauthorized (404): if the user has no entry for it.
        """
        product_id = parse_record_id(raw_product_id, "Product ID")
        if self.repo.delete_owned(session, user_id, product_id) == 0:
            raise NotFoundOrUnauthorized(
                "Item not found in wishlist or does not belong to user"
            )
        logger.info(f"Item removed from wishlist: {product_id}")
