import os
import tempfile

# Settings are read when app.core.config is first imported
os.environ.setdefault("UPLOADS_DIR", tempfile.mkdtemp(prefix="closied-uploads-"))
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("REALTOR_API_KEY", "test-key")

import httpx
import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from app.api.dependencies import get_listings_cache, get_listings_client
from app.db.memory import MemoryStore, get_store
from app.main import app
from app.services.listings_cache_service import ListingsCache
from app.services.listings_service import RealtorClient


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeRealtor:
    """Records upstream requests and answers with a configurable responder."""

    def __init__(self):
        self.requests = []
        self.responder = lambda request: httpx.Response(200, json={"properties": []})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def client(self) -> RealtorClient:
        return RealtorClient(api_key="test-key", transport=httpx.MockTransport(self.handler))


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def realtor(clock):
    fake = FakeRealtor()

    def cache_override(
        store: MemoryStore = Depends(get_store),
        listings_client: RealtorClient = Depends(get_listings_client)
    ):
        return ListingsCache(store, listings_client, ttl_seconds=600, clock=clock)

    app.dependency_overrides[get_listings_client] = fake.client
    app.dependency_overrides[get_listings_cache] = cache_override
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Registers and logs in a user, returning (user_id, auth headers)."""
    def _register(email: str, password: str = "pw123"):
        response = client.post("/auth/register", json={"email": email, "password": password})
        assert response.status_code == 200
        login = client.post("/auth/login", json={"email": email, "password": password})
        assert login.status_code == 200
        token = login.json()["token"]
        return response.json()["user"]["id"], {"Authorization": f"Bearer {token}"}
    return _register
