import json
from dataclasses import dataclass

import httpx

from pinning_relay.adapter.client.http import RetryPolicy, request_with_retry
from pinning_relay.common.config import PinataCredentials, settings
from pinning_relay.common.errors import PinRejectedError, PinResponseError

PIN_FILE_PATH = "/pinning/pinFileToIPFS"
TEST_AUTH_PATH = "/data/testAuthentication"


@dataclass(frozen=True)
class PinResult:
    content_id: str
    gateway_url: str


def gateway_url(content_id: str) -> str:
    return f"{settings.pinata_gateway.rstrip('/')}/ipfs/{content_id}"


def error_body(response: httpx.Response) -> str:
    try:
        return json.dumps(response.json(), separators=(",", ":"), ensure_ascii=False)
    except ValueError:
        return response.text


async def pin_file(
    client: httpx.AsyncClient,
    credentials: PinataCredentials,
    *,
    stage: str,
    filename: str,
    content: bytes,
    content_type: str,
    policy: RetryPolicy | None = None,
) -> PinResult:
    response = await request_with_retry(
        client,
        "POST",
        f"{settings.pinata_api_base}{PIN_FILE_PATH}",
        policy=policy,
        headers=credentials.headers(),
        data={"pinataMetadata": json.dumps({"name": filename})},
        files={"file": (filename, content, content_type)},
    )
    if not response.is_success:
        raise PinRejectedError(stage, response.status_code, error_body(response))

    try:
        content_id = response.json().get("IpfsHash")
    except (ValueError, AttributeError) as exc:
        raise PinResponseError(f"{stage} upload returned an unreadable body: {exc}") from exc
    if not isinstance(content_id, str) or not content_id:
        raise PinResponseError(f"{stage} upload response is missing IpfsHash")
    return PinResult(content_id=content_id, gateway_url=gateway_url(content_id))


async def check_authentication(
    client: httpx.AsyncClient,
    credentials: PinataCredentials,
    timeout_s: float | None = None,
) -> httpx.Response:
    return await client.get(
        f"{settings.pinata_api_base}{TEST_AUTH_PATH}",
        headers=credentials.headers(),
        timeout=timeout_s if timeout_s is not None else settings.pinata_timeout_s,
    )
