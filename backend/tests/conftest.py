from __future__ import annotations

import pytest
import requests
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_store

from pawgraph.seed.fixture_provider import FixtureSeedProvider, FixtureDog
from pawgraph.seed.seeder import StoreSeeder
from pawgraph.store.entity_schema import Breed
from pawgraph.store.entity_store import EntityStore


SCENARIO_PEOPLE = [("Pat", "One"), ("Sam", "Two")]

# D1 -> P1, D2 -> P2, D3 -> P1
SCENARIO_DOGS = [
    FixtureDog("Mr. Rex", Breed.LABRADOR, "https://example.test/d1.jpg", 0),
    FixtureDog("Mrs. Fifi", Breed.POODLE, "https://example.test/d2.jpg", 1),
    FixtureDog("Dr. Bolt", Breed.LABRADOR, "https://example.test/d3.jpg", 0),
]

MISSING_ID = "00000000-0000-0000-0000-000000000000"


class StubResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"status {self.status_code}")

    def json(self):
        return self.payload


class StubSession:
    """
    Stands in for requests.Session: replays canned responses, then
    raises `error` once they run out.
    """

    def __init__(self, responses=None, error: Exception | None = None) -> None:
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if not self.responses and self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest.fixture()
def provider() -> FixtureSeedProvider:
    return FixtureSeedProvider(people=SCENARIO_PEOPLE, dogs=SCENARIO_DOGS)


@pytest.fixture()
def store(provider: FixtureSeedProvider) -> EntityStore:
    store = EntityStore()
    StoreSeeder(store, provider).seed(people_count=2, dog_count=3)
    return store


@pytest.fixture()
def client(store: EntityStore):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig(latency_ms=0))
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
