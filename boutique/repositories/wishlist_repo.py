# boutique/repositories/wishlist_repo.py
import uuid

from sqlalchemy import delete
from sqlmodel import Session, select

from boutique.models.wishlist import WishlistEntry


class WishlistRepository:

    def list_for_user(
        self, session: Session, user_id: uuid.UUID
    ) -> list[WishlistEntry]:
        stmt = (
            select(WishlistEntry)
            .where(WishlistEntry.user_id == user_id)
            .order_by(WishlistEntry.added_at)
        )
        return session.exec(stmt).all()

    def create(self, session: Session, entry: WishlistEntry) -> WishlistEntry:
        """Insert an entry; a duplicate (user, product) raises IntegrityError."""
        session.add(entry)
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise
        session.refresh(entry)
        return entry

    def delete_owned(
        self,
        session: Session,
        user_id: uuid.UUID,
        product_id: uuid.UUID,
    ) -> int:
        stmt = delete(WishlistEntry).where(
            WishlistEntry.user_id == user_id,
            WishlistEntry.product_id == product_id,
        )
        deleted = session.exec(stmt).rowcount
        session.commit()
        return deleted
