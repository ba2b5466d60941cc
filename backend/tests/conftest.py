"""Pytest fixtures — in-memory MongoDB (mongomock-motor) per test."""
import asyncio
import os

# 앱 import 전에 설정이 잡혀 있어야 함 (JWT_SECRET_KEY 는 필수값)
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.db import mongo
from app.main import app


@pytest.fixture(scope="function")
def db():
    """Fresh mock database with the production indexes."""
    mongo.db = AsyncMongoMockClient()["schedule_test"]
    asyncio.run(mongo.ensure_indexes())
    yield mongo.db
    mongo.db = None


@pytest.fixture(scope="function")
def client(db):
    """TestClient without lifespan, so no real MongoDB connection is made."""
    return TestClient(app)


def register_user(client: TestClient, username: str = "alice", email: str | None = None,
                  password: str = "s3cret!") -> dict:
    """Helper — POST /api/auth/register and return response JSON."""
    resp = client.post("/api/auth/register", json={
        "username": username,
        "email": email or f"{username}@schedule.io",
        "password": password,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def alice(client):
    return register_user(client, "alice")


@pytest.fixture
def bob(client):
    return register_user(client, "bob")


@pytest.fixture
def auth_headers(alice):
    return {"Authorization": f"Bearer {alice['token']}"}
