"""
Tests for authentication endpoints.
"""
from datetime import timedelta

from bson import ObjectId

from app.core.security import create_access_token
from conftest import auth_header, register


def test_register(client):
    """Test user registration returns a token and public summary."""
    body = register(client, username="  carol  ", email="Carol@Example.com")
    assert body["token"]
    assert body["user"]["username"] == "carol"
    assert body["user"]["email"] == "carol@example.com"
    assert ObjectId.is_valid(body["user"]["id"])


def test_register_stores_hashed_password(client, db):
    register(client, email="dave@example.com", password="plain-password")
    stored = db["users"].find_one({"email": "dave@example.com"})
    assert stored["password"] != "plain-password"
    assert stored["password"].startswith("$2")
    assert stored["profilePicture"] == ""


def test_register_duplicate_email(client, alice):
    response = client.post(
        "/api/register",
        json={"username": "other", "email": "ALICE@example.com", "password": "pw123456"},
    )
    assert response.status_code == 400
    assert response.json() == {"msg": "User already exists"}


def test_register_invalid_email(client):
    response = client.post(
        "/api/register",
        json={"username": "eve", "email": "not-an-email", "password": "pw123456"},
    )
    assert response.status_code == 400
    assert response.json() == {"msg": "Invalid Email Format"}


def test_register_missing_field(client):
    response = client.post("/api/register", json={"email": "x@example.com", "password": "pw"})
    assert response.status_code == 400
    assert "username" in response.json()["msg"]


def test_login(client, alice):
    """Test user login with the registration credentials."""
    response = client.post(
        "/api/login",
        json={"email": "alice@example.com", "password": "s3cret-pass"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["user"] == alice["user"]

    profile = client.get("/api/auth/user", headers=auth_header(body["token"]))
    assert profile.status_code == 200
    assert profile.json()["_id"] == alice["user"]["id"]


def test_login_invalid_credentials_do_not_leak(client, alice):
    """Unknown email and wrong password get the same answer."""
    wrong_password = client.post(
        "/api/login",
        json={"email": "alice@example.com", "password": "wrong"},
    )
    unknown_email = client.post(
        "/api/login",
        json={"email": "nobody@example.com", "password": "s3cret-pass"},
    )
    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"msg": "Invalid Credentials"}


def test_profile_excludes_password(client, alice):
    response = client.get("/api/auth/user", headers=auth_header(alice["token"]))
    assert response.status_code == 200
    body = response.json()
    assert "password" not in body
    assert body["email"] == "alice@example.com"
    assert body["profilePicture"] == ""
    assert "createdAt" in body


def test_raw_token_without_bearer_prefix(client, alice):
    response = client.get("/api/auth/user", headers={"Authorization": alice["token"]})
    assert response.status_code == 200


def test_missing_token(client):
    response = client.get("/api/auth/user")
    assert response.status_code == 401
    assert response.json() == {"msg": "No token, authorization denied"}


def test_invalid_token(client):
    response = client.get("/api/auth/user", headers=auth_header("garbage"))
    assert response.status_code == 400
    assert response.json() == {"msg": "Token is not valid"}


def test_empty_bearer_token(client):
    response = client.get("/api/auth/user", headers={"Authorization": "Bearer "})
    assert response.status_code == 400
    assert response.json() == {"msg": "Token is not valid"}


def test_expired_token(client, alice):
    token = create_access_token(alice["user"]["id"], expires_delta=timedelta(seconds=-1))
    response = client.get("/api/auth/user", headers=auth_header(token))
    assert response.status_code == 400
    assert response.json() == {"msg": "Token is not valid"}


def test_token_for_missing_user(client):
    token = create_access_token(str(ObjectId()))
    response = client.get("/api/auth/user", headers=auth_header(token))
    assert response.status_code == 404
    assert response.json() == {"msg": "User not found"}


def test_login_unknown_email_still_checks_a_hash(client, alice, monkeypatch):
    from app.services import user_service

    checked = []
    real_verify = user_service.verify_password

    def recording_verify(plain, hashed):
        checked.append(hashed)
        return real_verify(plain, hashed)

    monkeypatch.setattr(user_service, "verify_password", recording_verify)
    response = client.post(
        "/api/login",
        json={"email": "nobody@example.com", "password": "s3cret-pass"},
    )
    assert response.status_code == 400
    assert response.json() == {"msg": "Invalid Credentials"}
    assert len(checked) == 1
    assert checked[0].startswith("$2")
