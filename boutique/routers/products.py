# boutique/routers/products.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from boutique.database import get_session
from boutique.repositories.product_repo import ProductRepository
from boutique.schemas.product import ProductRead
from boutique.services.product_service import ProductService

router = APIRouter(prefix="/dresses", tags=["Dresses"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[ProductRead])
def list_dresses(session: Session = Depends(get_session)):
    """List the whole catalog (public)."""
    return service.list_products(session)


@router.get("/{dress_id}", response_model=ProductRead)
def get_dress(
    dress_id: str,
    session: Session = Depends(get_session),
):
    """
    Get a single dress by id (public).

    400 if the id is malformed, 404 if it does not exist.
    """
    return service.get_product(session, dress_id)
