import os

# Set env vars BEFORE any imports from the project happen
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from artfolio_api.app.core.config import settings
from artfolio_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "artfolio.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    return path


@pytest.fixture
def client(db_path):
    # Entering the client runs the lifespan, which applies the migrations.
    with TestClient(app) as c:
        yield c


def register(client, username="yana", password="secret", **extra):
    payload = {"username": username, "email": f"{username}@example.com", "password": password}
    payload.update(extra)
    return client.post("/registerMember", json=payload)


def login(client, username="yana", password="secret"):
    return client.post("/loginMember", json={"username": username, "password": password})


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def member(client):
    """A registered, logged-in member: its session body plus auth headers."""
    register(client, location="Wellington", website="https://yana.art")
    body = login(client).json()
    body["headers"] = auth_headers(body["access_token"])
    return body


def portfolio_payload(title="Harbour at dusk", price=25, category="painting"):
    return {
        "title": title,
        "description": "Oil on canvas",
        "image": "https://images.example.com/harbour.jpg",
        "category": category,
        "price": price,
    }
