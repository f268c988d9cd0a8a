"""Pytest fixtures: an app backed by an in-memory mongomock client."""

import mongomock
import pytest

from contract_backend.app import create_app
from contract_backend.config.database import db_instance

JWT_SECRET = "test-jwt-secret-0123456789abcdef0123"


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "JWT_SECRET": JWT_SECRET,
            "MONGODB_DB": "contract_manager_test",
        },
        mongo_client=mongomock.MongoClient(),
    )
    yield app
    db_instance.close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return db_instance.get_db()


def register(client, name, email, password="secret123"):
    response = client.post(
        "/api/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client):
    return register(client, "Alice", "alice@x.com")


@pytest.fixture
def bob(client):
    return register(client, "Bob", "bob@x.com")


@pytest.fixture
def carol(client):
    return register(client, "Carol", "carol@x.com")
