import os

import httpx
import pytest

# Plain log lines keep pytest output readable.
os.environ["LOG_JSON"] = "false"

from pinning_relay.adapter.client import http as http_client  # noqa: E402
from pinning_relay.adapter.client.http import get_http_client  # noqa: E402
from pinning_relay.main import app  # noqa: E402


@pytest.fixture
def pinata_env(monkeypatch):
    monkeypatch.setenv("PINATA_API_KEY", "test-key")
    monkeypatch.setenv("PINATA_SECRET_API_KEY", "test-secret")


@pytest.fixture
def sleeps(monkeypatch) -> list[float]:
    recorded: list[float] = []

    async def _fake_sleep(delay: float) -> None:
        recorded.append(delay)

    monkeypatch.setattr(http_client, "_sleep", _fake_sleep)
    return recorded


@pytest.fixture
def mock_pinata():
    """Route outbound calls of the app to a handler; returns the captured requests."""
    captured: list[httpx.Request] = []

    def install(handler):
        def _recording_handler(request: httpx.Request):
            request.read()
            captured.append(request)
            return handler(request)

        async def _client():
            async with httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler)) as client:
                yield client

        app.dependency_overrides[get_http_client] = _client
        return captured

    yield install
    app.dependency_overrides.pop(get_http_client, None)
