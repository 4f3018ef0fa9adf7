"""Shared fixtures: stub transports and isolated settings."""
import json
from pathlib import Path
from typing import Callable

import httpx
import pytest

from wykop_api.adapters.client import Client
from wykop_api.core.config import AppSettings

TESTDATA = Path(__file__).parent / "testdata"

APP_KEY = "app"
USER_KEY = "user"


class TrackingStream(httpx.SyncByteStream):
    """Response body that records how many times it was closed."""

    def __init__(self, body: bytes):
        self.body = body
        self.close_count = 0

    def __iter__(self):
        yield self.body

    def close(self):
        self.close_count += 1


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request and every response body."""

    def __init__(self, body: bytes = b"null", status_code: int = 200):
        self.requests: list[httpx.Request] = []
        self.streams: list[TrackingStream] = []
        self.body = body
        self.status_code = status_code
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        stream = TrackingStream(self.body)
        self.streams.append(stream)
        return httpx.Response(
            self.status_code,
            headers={"Content-Type": "application/json"},
            stream=stream,
        )

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep tests independent from the developer's WYKOP_* env and .env files."""
    for name in ("APP_KEY", "USER_KEY", "SCHEME", "HOST", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"WYKOP_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


@pytest.fixture
def json_transport() -> Callable[[object], RecordingTransport]:
    """Factory: transport answering every request with `payload` as JSON."""

    def make(payload: object, status_code: int = 200) -> RecordingTransport:
        return RecordingTransport(json.dumps(payload).encode("utf-8"), status_code)

    return make


@pytest.fixture
def make_client(settings):
    """Factory: `Client` with fixed keys on top of the given transport."""
    clients = []

    def make(transport: httpx.BaseTransport) -> Client:
        client = Client(APP_KEY, USER_KEY, transport, settings=settings)
        clients.append(client)
        return client

    yield make
    for client in clients:
        client.close()
