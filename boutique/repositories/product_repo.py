# boutique/repositories/product_repo.py
import uuid

from sqlmodel import Session, select

from boutique.models.product import Product


class ProductRepository:
    """
    Data access layer for the catalog.

    - Pure DB operations.
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def list(self, session: Session) -> list[Product]:
        stmt = select(Product).order_by(Product.created_at)
        return session.exec(stmt).all()

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product
