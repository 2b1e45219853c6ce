import logging

import httpx
from fastapi import HTTPException

from pinning_relay.adapter.client.pinata import check_authentication
from pinning_relay.common.config import PinataCredentials
from pinning_relay.schemas import PinataTestResponse

logger = logging.getLogger(__name__)


async def probe_pinata(client: httpx.AsyncClient, credentials: PinataCredentials) -> PinataTestResponse:
    try:
        response = await check_authentication(client, credentials)
    except httpx.HTTPError as exc:
        logger.warning("pinata_probe_failed", extra={"error": str(exc)})
        raise HTTPException(status_code=500, detail=f"Connection failed: {exc}") from exc

    logger.info("pinata_probe_status", extra={"status_code": response.status_code})
    if not response.is_success:
        raise HTTPException(status_code=response.status_code, detail=response.text)

    try:
        result = response.json()
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=f"Connection failed: {exc}") from exc
    return PinataTestResponse(success=True, message="Pinata connection successful!", result=result)
