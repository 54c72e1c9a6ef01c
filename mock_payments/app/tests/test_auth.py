import pytest
from fastapi.testclient import TestClient

from ..core.errors import AuthenticationRequiredError
from ..core.security import decode_basic_credentials
from .helpers import basic_auth, payment_body

PROTECTED = [
    ("post", "/make-payment"),
    ("get", "/get-transaction-details/1"),
]


@pytest.mark.parametrize("method, path", PROTECTED)
@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer abc"},
        {"Authorization": "Basic !!!not-base64!!!"},
        {"Authorization": "Basic bm9jb2xvbg=="},  # "nocolon"
        {"Authorization": b"Basic \xe9\xe9\xe9\xe9"},
    ],
)
def test_missing_or_malformed_auth_is_rejected(
    client: TestClient, method, path, headers
) -> None:
    response = client.request(method, path, json=payment_body(), headers=headers)
    assert response.status_code == 401
    assert response.json() == {"status": 401, "message": "Authentication required"}
    assert response.headers["WWW-Authenticate"] == "Basic"


@pytest.mark.parametrize("method, path", PROTECTED)
def test_wrong_credentials_are_rejected(client: TestClient, method, path) -> None:
    response = client.request(
        method, path, json=payment_body(), headers=basic_auth(password="nope")
    )
    assert response.status_code == 401
    assert response.json() == {"status": 401, "message": "Invalid username or password"}


def test_auth_can_be_disabled(client: TestClient, settings, count_rows) -> None:
    settings.auth_enabled = False

    response = client.post("/make-payment", json=payment_body())
    assert response.status_code == 200
    assert count_rows() == 1


def test_credentials_from_settings_are_accepted(client: TestClient, settings) -> None:
    settings.auth_username = "alice"
    settings.auth_password = "s3cret:with:colons"

    issued = client.post("/get-credentials").json()
    response = client.post(
        "/make-payment",
        json=payment_body(),
        headers=basic_auth(issued["username"], issued["password"]),
    )
    assert response.status_code == 200


def test_decode_splits_on_first_colon() -> None:
    header = basic_auth("user", "pa:ss")["Authorization"]
    assert decode_basic_credentials(header) == ("user", "pa:ss")


def test_decode_requires_header() -> None:
    with pytest.raises(AuthenticationRequiredError):
        decode_basic_credentials(None)
