# boutique/repositories/order_repo.py
import uuid

from sqlmodel import Session, select

from boutique.models.order import Order


class OrderRepository:
    """
    Data access layer for orders.

    Orders are append-only: there is no update or delete here.
    """

    def list_for_user(self, session: Session, user_id: uuid.UUID) -> list[Order]:
        stmt = (
            select(Order)
            .where(Order.user_id == user_id)
            .order_by(Order.order_date.desc())
        )
        return session.exec(stmt).all()

    def create(self, session: Session, order: Order) -> Order:
        session.add(order)
        session.commit()
        session.refresh(order)
        return order
