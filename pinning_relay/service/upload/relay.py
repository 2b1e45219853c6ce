import logging
import time

import httpx

from pinning_relay.adapter.client.http import RetryPolicy
from pinning_relay.adapter.client.pinata import pin_file
from pinning_relay.common.config import PinataCredentials
from pinning_relay.schemas import UploadResponse
from pinning_relay.service.upload.metadata import build_metadata, serialize_metadata

logger = logging.getLogger(__name__)


def generate_file_name() -> str:
    return f"image-{int(time.time() * 1000)}"


async def relay_upload(
    client: httpx.AsyncClient,
    credentials: PinataCredentials,
    content: bytes,
    policy: RetryPolicy | None = None,
) -> UploadResponse:
    """Pin an image, then pin metadata that references the image CID.

    The metadata pin is only issued once the image pin has returned a CID.
    """
    file_name = generate_file_name()

    image = await pin_file(
        client,
        credentials,
        stage="Image",
        filename=file_name,
        content=content,
        content_type="image/*",
        policy=policy,
    )
    logger.info("image_pinned", extra={"cid": image.content_id, "size_bytes": len(content)})

    metadata = build_metadata(file_name, image, size_bytes=len(content))
    metadata_file = await pin_file(
        client,
        credentials,
        stage="Metadata",
        filename=f"{file_name}-metadata.json",
        content=serialize_metadata(metadata),
        content_type="application/json",
        policy=policy,
    )
    logger.info("metadata_pinned", extra={"cid": metadata_file.content_id})

    return UploadResponse(
        image_cid=image.content_id,
        image_url=image.gateway_url,
        metadata_cid=metadata_file.content_id,
        metadata_url=metadata_file.gateway_url,
        metadata=metadata,
    )
