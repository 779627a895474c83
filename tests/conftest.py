"""
Shared test fixtures.

Each test gets a fresh in-memory SQLite database; the app's `get_session`
dependency is overridden to use it.
"""

import base64
import os
import uuid

# Keep the module-level engine away from any real database.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from boutique.core.credentials import encode_secret
from boutique.database import get_session
from boutique.main import app
from boutique.models.product import Product
from boutique.models.user import User


def basic_auth(email: str, password: str) -> dict[str, str]:
    """Build an Authorization header the way the frontend does."""
    token = base64.b64encode(f"{email}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_test_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_test_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def unsafe_client(client):
    """Client that returns 500 responses instead of re-raising server errors."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_user(session):
    def _make_user(
        email: str = "u@x.com",
        password: str = "pw123",
        name: str | None = "Test User",
    ) -> User:
        user = User(email=email, encoded_password=encode_secret(password), name=name)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_product(session):
    def _make_product(name: str = "Satin Slip Dress", price: float = 49.99) -> Product:
        product = Product(
            name=name,
            price=price,
            sizes=["S", "M", "L"],
            images=["https://cdn.example.com/dress.jpg"],
            attributes={"color": "black"},
        )
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make_product


@pytest.fixture
def alice(make_user) -> User:
    return make_user(email="alice@example.com", password="alice-pw")


@pytest.fixture
def bob(make_user) -> User:
    return make_user(email="bob@example.com", password="bob-pw")


@pytest.fixture
def alice_headers(alice) -> dict[str, str]:
    return basic_auth("alice@example.com", "alice-pw")


@pytest.fixture
def bob_headers(bob) -> dict[str, str]:
    return basic_auth("bob@example.com", "bob-pw")


@pytest.fixture
def product_id() -> str:
    """A well-formed product id; carts don't require the product to exist."""
    return str(uuid.uuid4())
