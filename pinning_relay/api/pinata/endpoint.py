import httpx
from fastapi import APIRouter, Depends

from pinning_relay.adapter.client.http import get_http_client
from pinning_relay.common.config import PinataCredentials, get_pinata_credentials
from pinning_relay.schemas import ErrorResponse, PinataTestResponse
from pinning_relay.service.pinata.probe import probe_pinata

router = APIRouter(prefix="/api", tags=["pinata"])


@router.get("/pinata-test", response_model=PinataTestResponse, responses={500: {"model": ErrorResponse}})
async def pinata_test(
    credentials: PinataCredentials = Depends(get_pinata_credentials),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> PinataTestResponse:
    return await probe_pinata(client, credentials)
