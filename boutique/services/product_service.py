# boutique/services/product_service.py
from sqlmodel import Session

from boutique.core.errors import NotFoundError
from boutique.core.ids import parse_record_id
from boutique.models.product import Product
from boutique.repositories.product_repo import ProductRepository
from boutique.schemas.product import ProductSeed


class ProductService:
    """
    Read access to the catalog. No ownership, no authentication.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self, session: Session) -> list[Product]:
        return self.repo.list(session)

    def get_product(self, session: Session, raw_id: str) -> Product:
        """
        Get a single product by id.

        Raises:
            InvalidIdentifierFormat (400): before querying, if raw_id is not a UUID.
            NotFoundError (404): if no such product.
        """
        product_id = parse_record_id(raw_id, "product ID")
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise NotFoundError("Dress not found")
        return product

    def add_product(self, session: Session, payload: ProductSeed) -> Product:
        """Insert a catalog entry (used by seed_catalog.py, not exposed over HTTP)."""
        return self.repo.create(session, Product(**payload.model_dump()))
