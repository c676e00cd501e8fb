"""Registration, login and the access-cookie dependency."""

import pytest

from core.errors import Conflict, InvalidCredentials
from services.auth_services import AuthService

PASSWORD = "Sup3rSecret!"


def register(client, email="dana@example.com", full_name="Dana"):
    return client.post("/auth/register", json={"email": email, "fullName": full_name, "password": PASSWORD})


def test_register_then_login_sets_cookie(client):
    response = register(client)
    assert response.status_code == 201
    assert response.json()["fullName"] == "Dana"

    login = client.post("/auth/login", json={"email": "dana@example.com", "password": PASSWORD})
    assert login.status_code == 200
    assert "access_token" in login.cookies

    me = client.get("/auth/me")
    assert me.status_code == 200
    assert me.json()["email"] == "dana@example.com"


def test_logged_in_user_reaches_core_routes(client):
    register(client)
    client.post("/auth/login", json={"email": "dana@example.com", "password": PASSWORD})

    response = client.get("/vocabulary")
    assert response.status_code == 200
    assert response.json()["pagination"]["totalItems"] == 0


def test_wrong_password_is_401(client):
    register(client)
    response = client.post("/auth/login", json={"email": "dana@example.com", "password": "wrong-password"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_duplicate_email_is_rejected(client):
    register(client)
    response = register(client)
    assert response.status_code == 400
    assert response.json() == {"message": "Email already registered"}


def test_weak_password_is_400(client):
    response = client.post("/auth/register", json={"email": "eve@example.com", "fullName": "Eve", "password": "short"})
    assert response.status_code == 400


def test_me_without_cookie_is_401(client):
    assert client.get("/auth/me").status_code == 401


def test_service_errors(db):
    svc = AuthService(db)
    svc.register(email="dana@example.com", full_name="Dana", password=PASSWORD)
    with pytest.raises(Conflict):
        svc.register(email="dana@example.com", full_name="Dana", password=PASSWORD)
    with pytest.raises(InvalidCredentials):
        svc.login(email="nobody@example.com", password=PASSWORD)
