import json
from datetime import datetime, timezone

from pinning_relay.adapter.client.pinata import PinResult
from pinning_relay.schemas import MetadataAttribute, MetadataFile, MetadataProperties, NftMetadata


def build_metadata(
    name: str,
    image: PinResult,
    size_bytes: int,
    now: datetime | None = None,
) -> NftMetadata:
    now = now or datetime.now(timezone.utc)
    image_uri = f"ipfs://{image.content_id}"
    return NftMetadata(
        name=name,
        description=f"NFT image uploaded on {_iso_timestamp(now)}",
        image=image_uri,
        external_url=image.gateway_url,
        attributes=[
            MetadataAttribute(trait_type="Upload Date", value=f"{now.month}/{now.day}/{now.year}"),
            MetadataAttribute(trait_type="File Size", value=f"{size_bytes} bytes"),
            MetadataAttribute(trait_type="CID", value=image.content_id),
        ],
        properties=MetadataProperties(
            files=[MetadataFile(uri=image_uri, type="image", cdn=True)],
            category="image",
        ),
    )


def serialize_metadata(metadata: NftMetadata) -> bytes:
    return json.dumps(metadata.model_dump(), indent=2, ensure_ascii=False).encode("utf-8")


def _iso_timestamp(now: datetime) -> str:
    utc = now.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
