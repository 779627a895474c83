import uuid

import pytest
from sqlmodel import select

from boutique.core.errors import DuplicateEntry
from boutique.models.wishlist import WishlistEntry
from boutique.repositories.wishlist_repo import WishlistRepository
from boutique.schemas.wishlist import WishlistEntryCreate
from boutique.services.wishlist_service import WishlistService


def _entries(session) -> list[WishlistEntry]:
    session.expire_all()
    return session.exec(select(WishlistEntry)).all()


class TestWishlistRoutes:

    def test_add_entry(self, client, alice, alice_headers, product_id):
        response = client.post(
            "/wishlist", headers=alice_headers, json={"product_id": product_id}
        )
        assert response.status_code == 201
        body = response.json()
        assert body["product_id"] == product_id
        assert body["user_id"] == str(alice.id)

    def test_duplicate_is_rejected_and_store_unchanged(
        self, client, session, alice_headers, product_id
    ):
        first = client.post(
            "/wishlist", headers=alice_headers, json={"product_id": product_id}
        )
        before = [(e.id, e.added_at) for e in _entries(session)]

        second = client.post(
            "/wishlist", headers=alice_headers, json={"product_id": product_id}
        )
        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"message": "Item already in wishlist"}
        assert [(e.id, e.added_at) for e in _entries(session)] == before

    def test_same_product_for_two_users(
        self, client, session, alice_headers, bob_headers, product_id
    ):
        payload = {"product_id": product_id}
        assert client.post("/wishlist", headers=alice_headers, json=payload).status_code == 201
        assert client.post("/wishlist", headers=bob_headers, json=payload).status_code == 201
        assert len(_entries(session)) == 2

    def test_invalid_product_id(self, client, alice_headers):
        response = client.post(
            "/wishlist", headers=alice_headers, json={"product_id": "nope"}
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid productId format"}

    def test_missing_product_id(self, client, alice_headers):
        response = client.post("/wishlist", headers=alice_headers, json={})
        assert response.status_code == 400

    def test_list_only_own_entries(
        self, client, alice_headers, bob_headers, product_id
    ):
        other = str(uuid.uuid4())
        client.post("/wishlist", headers=alice_headers, json={"product_id": product_id})
        client.post("/wishlist", headers=bob_headers, json={"product_id": other})

        alice_list = client.get("/wishlist", headers=alice_headers).json()
        assert [e["product_id"] for e in alice_list] == [product_id]

    def test_remove_by_product_id(self, client, session, alice_headers, product_id):
        client.post("/wishlist", headers=alice_headers, json={"product_id": product_id})
        response = client.delete(f"/wishlist/{product_id}", headers=alice_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Item removed from wishlist"}
        assert _entries(session) == []

    def test_remove_other_users_entry_looks_missing(
        self, client, session, alice_headers, bob_headers, product_id
    ):
        client.post("/wishlist", headers=bob_headers, json={"product_id": product_id})

        foreign = client.delete(f"/wishlist/{product_id}", headers=alice_headers)
        missing = client.delete(f"/wishlist/{uuid.uuid4()}", headers=alice_headers)
        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json()
        assert len(_entries(session)) == 1

    def test_remove_invalid_id(self, client, alice_headers):
        response = client.delete("/wishlist/123", headers=alice_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid Product ID format"}


def test_service_raises_duplicate_entry(session, alice):
    service = WishlistService(WishlistRepository())
    payload = WishlistEntryCreate(product_id=str(uuid.uuid4()))
    service.add_entry(session, alice.id, payload)
    with pytest.raises(DuplicateEntry):
        service.add_entry(session, alice.id, payload)
    assert len(service.list_entries(session, alice.id)) == 1
