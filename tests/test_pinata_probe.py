import httpx
from fastapi.testclient import TestClient

from pinning_relay.main import app


def test_probe_reports_success(pinata_env, mock_pinata) -> None:
    captured = mock_pinata(
        lambda request: httpx.Response(
            200, json={"message": "Congratulations! You are communicating with the Pinata API!"}
        )
    )
    client = TestClient(app)

    response = client.get("/api/pinata-test")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Pinata connection successful!",
        "result": {"message": "Congratulations! You are communicating with the Pinata API!"},
    }
    assert len(captured) == 1
    assert captured[0].method == "GET"
    assert captured[0].url.path == "/data/testAuthentication"
    assert captured[0].headers["pinata_api_key"] == "test-key"


def test_probe_relays_remote_status(pinata_env, mock_pinata) -> None:
    captured = mock_pinata(lambda request: httpx.Response(401, text="Invalid API key"))
    client = TestClient(app)

    response = client.get("/api/pinata-test")

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid API key"}
    assert len(captured) == 1


def test_probe_is_not_retried_on_transport_error(pinata_env, mock_pinata, sleeps) -> None:
    def handler(request):
        raise httpx.ConnectError("name resolution failed", request=request)

    captured = mock_pinata(handler)
    client = TestClient(app)

    response = client.get("/api/pinata-test")

    assert response.status_code == 500
    assert response.json() == {"error": "Connection failed: name resolution failed"}
    assert len(captured) == 1
    assert sleeps == []


def test_probe_requires_credentials(monkeypatch, mock_pinata) -> None:
    monkeypatch.delenv("PINATA_API_KEY", raising=False)
    monkeypatch.setenv("PINATA_SECRET_API_KEY", "only-secret")
    captured = mock_pinata(lambda request: httpx.Response(200, json={}))
    client = TestClient(app)

    response = client.get("/api/pinata-test")

    assert response.status_code == 500
    assert response.json() == {"error": "Pinata credentials not configured"}
    assert captured == []


def test_health() -> None:
    client = TestClient(app)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "pinning-relay"}
    assert response.headers["x-request-id"]
