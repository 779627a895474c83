"""
Tests for the global error handlers: every failure is {"message": ...}
and internal details never reach the client.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from boutique.core.error_handlers import register_error_handlers
from boutique.core.errors import (
    ConflictError,
    InternalError,
    NotFoundOrUnauthorized,
    ValidationError,
)
from boutique.routers import cart as cart_router


@pytest.fixture
def error_app() -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/conflict")
    def conflict():
        raise ConflictError("already there")

    @app.get("/hidden")
    def hidden():
        raise NotFoundOrUnauthorized()

    @app.get("/invalid")
    def invalid():
        raise ValidationError()

    @app.get("/internal")
    def internal():
        raise InternalError("connection string postgres://secret@db")

    @app.get("/crash")
    def crash():
        raise RuntimeError("stack detail: password=hunter2")

    @app.get("/typed/{n}")
    def typed(n: int):
        return {"n": n}

    return TestClient(app, raise_server_exceptions=False)


def test_domain_error_uses_its_status(error_app):
    response = error_app.get("/conflict")
    assert response.status_code == 409
    assert response.json() == {"message": "already there"}


def test_default_messages(error_app):
    assert error_app.get("/hidden").json() == {
        "message": "Record not found or does not belong to user"
    }
    assert error_app.get("/invalid").status_code == 400


@pytest.mark.parametrize("path", ["/internal", "/crash"])
def test_internal_details_are_not_leaked(error_app, path):
    response = error_app.get(path)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "secret" not in response.text
    assert "hunter2" not in response.text


def test_request_validation_is_400_with_details(error_app):
    response = error_app.get("/typed/abc")
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    assert body["details"][0]["field"] == "path.n"


def test_store_failure_becomes_generic_500(
    unsafe_client, alice_headers, monkeypatch
):
    def broken_store(session, user_id):
        raise OperationalError("SELECT ...", {}, Exception("disk I/O error"))

    monkeypatch.setattr(cart_router.service.cart_repo, "list_for_user", broken_store)

    response = unsafe_client.get("/carts", headers=alice_headers)
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "disk" not in response.text


def test_health(client):
    assert client.get("/").json() == {"status": "ok", "service": "boutique-backend"}


def test_unknown_route_uses_message_shape(client):
    response = client.get("/no-such-route")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_wrong_method(client):
    response = client.patch("/dresses")
    assert response.status_code == 405
    assert "message" in response.json()
