from datetime import datetime, timedelta, timezone

import pytest

from boutique.models.order import Order
from boutique.repositories.order_repo import OrderRepository

CHECKOUT = {
    "products": [
        {"product_id": "6c7c2f0e-1111-4c1b-9a55-7a9b1c0d2e3f", "size": "M", "quantity": 1,
         "price": 49.99},
    ],
    "shipping": {"address": "12 Long St", "city": "Cape Town"},
    "total": 49.99,
}


class TestPlaceOrder:

    def test_places_order(self, client, alice, alice_headers):
        response = client.post("/orders", headers=alice_headers, json=CHECKOUT)
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "Processing"
        assert body["user_id"] == str(alice.id)
        assert body["details"]["shipping"] == CHECKOUT["shipping"]
        assert body["details"]["products"] == CHECKOUT["products"]
        assert body["details"]["total"] == 49.99

    @pytest.mark.parametrize(
        "payload",
        [{}, {"products": []}, {"products": None, "shipping": {}}],
    )
    def test_rejects_empty_products(self, client, alice_headers, payload):
        response = client.post("/orders", headers=alice_headers, json=payload)
        assert response.status_code == 400
        assert response.json() == {"message": "Order data is incomplete or empty."}

    def test_client_cannot_choose_owner_or_status(
        self, client, alice, bob, alice_headers
    ):
        payload = {**CHECKOUT, "user_id": str(bob.id), "status": "Delivered"}
        body = client.post("/orders", headers=alice_headers, json=payload).json()
        assert body["user_id"] == str(alice.id)
        assert body["status"] == "Processing"


class TestListOrders:

    def test_lists_only_own_orders(self, client, alice_headers, bob_headers):
        client.post("/orders", headers=alice_headers, json=CHECKOUT)
        client.post("/orders", headers=bob_headers, json=CHECKOUT)
        client.post("/orders", headers=bob_headers, json=CHECKOUT)

        assert len(client.get("/orders", headers=alice_headers).json()) == 1
        assert len(client.get("/orders", headers=bob_headers).json()) == 2

    def test_newest_first(self, session, alice):
        repo = OrderRepository()
        now = datetime.now(timezone.utc)
        older = repo.create(
            session,
            Order(user_id=alice.id, details={"products": [1]}, order_date=now - timedelta(days=1)),
        )
        newer = repo.create(
            session,
            Order(user_id=alice.id, details={"products": [2]}, order_date=now),
        )
        assert [o.id for o in repo.list_for_user(session, alice.id)] == [newer.id, older.id]
