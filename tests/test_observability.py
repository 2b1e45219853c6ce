import json
import logging

from fastapi.testclient import TestClient

from pinning_relay import serve
from pinning_relay.main import app
from pinning_relay.observability import JsonLogFormatter


def test_json_formatter_emits_extra_fields_only() -> None:
    record = logging.makeLogRecord(
        {"name": "pinning_relay.test", "levelname": "INFO", "msg": "image_pinned", "cid": "QmImage", "size_bytes": 12}
    )

    payload = json.loads(JsonLogFormatter().format(record))

    assert payload["message"] == "image_pinned"
    assert payload["cid"] == "QmImage"
    assert payload["size_bytes"] == 12
    assert "lineno" not in payload
    assert "args" not in payload


def test_access_log_records_upload_size_and_request_id(monkeypatch, caplog) -> None:
    monkeypatch.delenv("PINATA_API_KEY", raising=False)
    client = TestClient(app)

    with caplog.at_level(logging.INFO, logger="pinning_relay.access"):
        response = client.post("/api/upload", content=b"abc", headers={"x-request-id": "req-1"})

    assert response.status_code == 500
    assert response.headers["x-request-id"] == "req-1"
    access = [record for record in caplog.records if record.name == "pinning_relay.access"]
    assert access[-1].request_id == "req-1"
    assert access[-1].status_code == 500
    assert access[-1].levelno == logging.WARNING
    assert access[-1].size_bytes == 3


def test_serve_runs_app_with_configured_address(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(serve.uvicorn, "run", lambda app_path, **kwargs: calls.append((app_path, kwargs)))

    serve.main()

    assert calls == [
        ("pinning_relay.main:app", {"host": serve.settings.host, "port": serve.settings.port, "log_config": None})
    ]
