import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, status

from pinning_relay.adapter.client.http import get_http_client
from pinning_relay.common.config import PinataCredentials, get_pinata_credentials, settings
from pinning_relay.common.errors import RelayError
from pinning_relay.schemas import ErrorResponse, UploadResponse
from pinning_relay.service.upload.relay import relay_upload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["upload"])


async def read_body(request: Request, limit: int) -> bytes:
    buffer = bytearray()
    async for chunk in request.stream():
        buffer.extend(chunk)
        if len(buffer) > limit:
            raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File too large")
    return bytes(buffer)


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 405: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload(
    request: Request,
    credentials: PinataCredentials = Depends(get_pinata_credentials),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> UploadResponse:
    content = await read_body(request, settings.max_upload_bytes)
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file data received")

    try:
        return await relay_upload(client, credentials, content)
    except (RelayError, httpx.HTTPError) as exc:
        logger.error("upload_failed", extra={"error": str(exc), "size_bytes": len(content)})
        raise HTTPException(status_code=500, detail=f"Upload failed: {exc}") from exc
