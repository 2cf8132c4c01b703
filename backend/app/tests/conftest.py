"""
Shared fixtures: environment, an in-memory document store and a test client.
"""
import os
import tempfile

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="trip-budget-uploads-"))

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.db.session import get_db, init_db
from app.main import app


@pytest.fixture()
def db():
    mongo_client = mongomock.MongoClient()
    database = mongo_client["trip_budget_test"]
    init_db(database)
    yield database
    mongo_client.close()


@pytest.fixture()
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client, username="alice", email="alice@example.com", password="s3cret-pass"):
    response = client.post(
        "/api/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def alice(client):
    return register(client)


@pytest.fixture()
def bob(client):
    return register(client, username="bob", email="bob@example.com", password="hunter22")
