"""Unit tests for the centralized exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from stockroom.domain.product import ProductNameAlreadyExistsError, ProductNotFoundError
from stockroom.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from stockroom.domain.user import EmailAlreadyExistsError, InvalidEmailError
from stockroom.presentation.api.exception_handlers import (
    _get_status_for_exception,
    setup_exception_handlers,
)
from stockroom_auth import InvalidCredentialsError, InvalidTokenError


@pytest.mark.parametrize(
    ("exc", "expected_status"),
    [
        (InvalidEmailError("x"), 400),
        (ValidationError("bad"), 400),
        (EmailAlreadyExistsError("ana@mail.com"), 409),
        (ProductNameAlreadyExistsError("Widget"), 409),
        (ProductNotFoundError("P1"), 404),
        (DomainException("boom"), 500),
    ],
)
def test_status_for_domain_exceptions(exc, expected_status):
    assert _get_status_for_exception(exc) == expected_status


def test_status_falls_back_to_exception_type():
    class CustomNotFound(NotFoundError):
        pass

    class CustomConflict(ConflictError):
        pass

    not_found = CustomNotFound("gone")
    not_found.code = "SOMETHING_ELSE"  # type: ignore[assignment]
    conflict = CustomConflict("taken")
    conflict.code = "SOMETHING_ELSE"  # type: ignore[assignment]

    assert _get_status_for_exception(not_found) == 404
    assert _get_status_for_exception(conflict) == 409


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/conflict")
    async def conflict():
        raise ProductNameAlreadyExistsError("Widget")

    @app.get("/credentials")
    async def credentials():
        raise InvalidCredentialsError

    @app.get("/token")
    async def token():
        raise InvalidTokenError("Token has expired")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret internals")

    return TestClient(app, raise_server_exceptions=False)


def test_domain_error_response_body(client):
    response = client.get("/conflict")

    assert response.status_code == 409
    assert response.json() == {
        "detail": "Name already in use",
        "code": ErrorCode.DUPLICATE_PRODUCT_NAME.value,
    }


def test_details_are_not_exposed(client):
    response = client.get("/conflict")

    assert "Widget" not in response.text


def test_invalid_credentials_maps_to_401(client):
    response = client.get("/credentials")

    assert response.status_code == 401
    assert response.json()["code"] == "UNAUTHORIZED"
    assert response.headers["www-authenticate"] == "Bearer"


def test_invalid_token_maps_to_401(client):
    response = client.get("/token")

    assert response.status_code == 401
    assert response.json()["detail"] == "Token has expired"


def test_unhandled_exception_is_generic_500(client):
    response = client.get("/crash")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An internal error occurred",
        "code": "INTERNAL_ERROR",
    }
    assert "secret internals" not in response.text
