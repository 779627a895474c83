# boutique/repositories/cart_repo.py
import uuid

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from boutique.models.cart import MAX_LINE_QUANTITY, CartLine

# Insert can lose a race against a concurrent insert of the same key;
# the retry then lands on the increment branch.
MAX_MERGE_ATTEMPTS = 3


class QuantityLimitExceeded(Exception):
    """Merging would push a line past MAX_LINE_QUANTITY."""


class CartRepository:
    """
    Data access layer for cart lines.

    Every query is filtered by user_id.
    """

    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[CartLine]:
        stmt = (
            select(CartLine)
            .where(CartLine.user_id == user_id)
            .order_by(CartLine.added_at)
        )
        return session.exec(stmt).all()

    def get_line(
        self,
        session: Session,
        user_id: uuid.UUID,
        product_id: uuid.UUID,
        size: str,
    ) -> CartLine | None:
        stmt = select(CartLine).where(
            CartLine.user_id == user_id,
            CartLine.product_id == product_id,
            CartLine.size == size,
        )
        return session.exec(stmt).first()

    def merge_line(
        self,
        session: Session,
        *,
        user_id: uuid.UUID,
        product_id: uuid.UUID,
        size: str,
        quantity: int,
    ) -> tuple[CartLine, bool]:
        """
        Add `quantity` to the (user, product, size) line, creating it if needed.

        The increment is a single `UPDATE ... SET quantity = quantity + n`,
        and the insert relies on the unique index, so concurrent adds of the
        same key end up in one line.

        Returns:
            (line, created) where created is True if a new row was inserted.

        Raises:
            QuantityLimitExceeded: if the merged quantity would exceed
                MAX_LINE_QUANTITY. The line is left unchanged.
            IntegrityError: if the line could not be merged after retries.
        """
        key = (
            CartLine.user_id == user_id,
            CartLine.product_id == product_id,
            CartLine.size == size,
        )

        attempt = 0
        while True:
            attempt += 1
            stmt = (
                update(CartLine)
                .where(*key, CartLine.quantity <= MAX_LINE_QUANTITY - quantity)
                .values(quantity=CartLine.quantity + quantity)
                .execution_options(synchronize_session=False)
            )
            result = session.exec(stmt)
            if result.rowcount:
                session.commit()
                return self.get_line(session, user_id, product_id, size), False

            if self.get_line(session, user_id, product_id, size) is not None:
                session.rollback()
                raise QuantityLimitExceeded()

            line = CartLine(
                user_id=user_id,
                product_id=product_id,
                size=size,
                quantity=quantity,
            )
            session.add(line)
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                if attempt == MAX_MERGE_ATTEMPTS:
                    raise
                continue
            session.refresh(line)
            return line, True

    def delete_owned(
        self,
        session: Session,
        user_id: uuid.UUID,
        line_id: uuid.UUID,
    ) -> int:
        """
        Delete a line only if it belongs to `user_id`.

        Returns:
            Number of deleted rows (0 if missing or owned by someone else).
        """
        stmt = delete(CartLine).where(
            CartLine.id == line_id,
            CartLine.user_id == user_id,
        )
        deleted = session.exec(stmt).rowcount
        session.commit()
        return deleted
