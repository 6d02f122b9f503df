"""Shared fixtures: a fake Twitch + IGDB upstream behind httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_http_client, get_token_cache
from app.logic.auth import TokenCache
from app.server import app


class FakeUpstream:
    """Answers Twitch token requests and IGDB game queries, recording what was sent."""

    def __init__(self):
        self.games: list | dict | Exception = []
        self.token_payload = {"access_token": "test-token", "expires_in": 3600, "token_type": "bearer"}
        self.token_status = 200
        self.token_calls = 0
        self.igdb_requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "id.twitch.tv":
            self.token_calls += 1
            return httpx.Response(self.token_status, json=self.token_payload)
        if request.url.host == "api.igdb.com":
            self.igdb_requests.append(request)
            if isinstance(self.games, Exception):
                raise self.games
            return httpx.Response(200, json=self.games)
        return httpx.Response(404)

    @property
    def last_query(self) -> str:
        return self.igdb_requests[-1].content.decode()


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))


@pytest.fixture
def token_cache(http_client, clock):
    return TokenCache(http_client, "test-client-id", "test-secret", clock=clock)


@pytest.fixture
def client(http_client, token_cache):
    """Test client with the shared HTTP client and token cache swapped for fakes."""
    app.dependency_overrides[get_http_client] = lambda: http_client
    app.dependency_overrides[get_token_cache] = lambda: token_cache
    yield TestClient(app)
    app.dependency_overrides.clear()
