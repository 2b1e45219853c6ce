import json
import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from pinning_relay.common.config import settings

# Attributes every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging() -> None:
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    if settings.log_json:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.addHandler(handler)


_access_logger = logging.getLogger("pinning_relay.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and writes one access line per request.

    Uploads also record the declared body size so a failed pin can be matched
    to the file that caused it.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:  # noqa: BLE001
            _access_logger.exception("request_failed", extra=_access_extra(request, request_id, 500, start))
            raise

        extra = _access_extra(request, request_id, response.status_code, start)
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        _access_logger.log(level, "request_complete", extra=extra)
        response.headers["x-request-id"] = request_id
        return response


def _access_extra(request: Request, request_id: str, status_code: int, start: float) -> dict:
    extra = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "latency_ms": round((time.perf_counter() - start) * 1000.0, 2),
    }
    content_length = request.headers.get("content-length")
    if request.method == "POST" and content_length is not None:
        extra["size_bytes"] = int(content_length) if content_length.isdigit() else content_length
    return extra
