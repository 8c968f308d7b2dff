# tests/http_api/test_auth.py

import pytest
from fastapi.testclient import TestClient


def test_login_success(client) -> None:
    response = client.post("/api/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200

    body = response.json()
    assert body["success"] is True
    assert body["token"] == "demo_jwt_token_admin_2024"
    assert body["user"] == {"username": "admin", "role": "admin"}


@pytest.mark.parametrize(
    "credentials",
    [
        {"username": "admin", "password": "wrong"},
        {"username": "root", "password": "admin123"},
        {"username": "", "password": ""},
        {"username": 123, "password": "admin123"},
        {"username": "admin", "password": None},
        {"username": ["admin"], "password": "admin123"},
        {},
    ],
)
def test_login_rejects_other_credentials(client, credentials) -> None:
    response = client.post("/api/login", json=credentials)
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}


def test_login_uses_configured_credentials(app_factory) -> None:
    app = app_factory(ADMIN_USERNAME="pharmacist", ADMIN_PASSWORD="s3cret", ADMIN_TOKEN="tok")
    with TestClient(app) as client:
        ok = client.post("/api/login", json={"username": "pharmacist", "password": "s3cret"})
        assert ok.status_code == 200
        assert ok.json()["token"] == "tok"

        default = client.post("/api/login", json={"username": "admin", "password": "admin123"})
        assert default.status_code == 401
