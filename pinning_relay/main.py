from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pinning_relay.api.health.endpoint import router as health_router
from pinning_relay.api.pinata.endpoint import router as pinata_router
from pinning_relay.api.upload.endpoint import router as upload_router
from pinning_relay.observability import RequestLoggingMiddleware, configure_logging

configure_logging()

app = FastAPI(title="Pinning Relay", version="0.1.0")
app.add_middleware(RequestLoggingMiddleware)
app.include_router(health_router)
app.include_router(upload_router)
app.include_router(pinata_router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Errors are rendered as {"error": ...}; headers such as Allow are kept.
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
