# seed_catalog.py
"""
Load dresses into the catalog from a JSON file.

    python seed_catalog.py dresses.json

The file holds a list of objects with name, price and optionally
description, sizes, images; any other key is kept in `attributes`.
"""

import json
import sys

from sqlmodel import Session

from boutique.database import create_db_and_tables, engine
from boutique.models import product as _product_models  # noqa: F401
from boutique.repositories.product_repo import ProductRepository
from boutique.schemas.product import ProductSeed
from boutique.services.product_service import ProductService


def main(path: str) -> None:
    with open(path, encoding="utf-8") as f:
        entries = [ProductSeed.model_validate(raw) for raw in json.load(f)]

    create_db_and_tables()
    service = ProductService(ProductRepository())

    with Session(engine) as session:
        for entry in entries:
            product = service.add_product(session, entry)
            print(f"Added {product.name} ({product.id})")

    print(f"Seeded {len(entries)} dresses.")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit("usage: python seed_catalog.py <dresses.json>")
    main(sys.argv[1])
