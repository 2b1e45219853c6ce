from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MetadataAttribute(BaseModel):
    model_config = ConfigDict(frozen=True)

    trait_type: str
    value: str


class MetadataFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    uri: str
    type: str = "image"
    cdn: bool = True


class MetadataProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    files: list[MetadataFile] = Field(default_factory=list)
    category: str = "image"


class NftMetadata(BaseModel):
    """ERC-721 style token metadata pointing at a pinned image."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    image: str
    external_url: str
    attributes: list[MetadataAttribute] = Field(default_factory=list)
    properties: MetadataProperties = Field(default_factory=MetadataProperties)


class UploadResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    image_cid: str
    image_url: str
    metadata_cid: str
    metadata_url: str
    metadata: NftMetadata


class PinataTestResponse(BaseModel):
    success: bool = True
    message: str
    result: Any = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
