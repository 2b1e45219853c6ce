import os
from dataclasses import dataclass

from dotenv import load_dotenv
from fastapi import HTTPException, status

load_dotenv()


@dataclass(frozen=True)
class Settings:
    pinata_api_base: str = os.getenv("PINATA_API_BASE", "https://api.pinata.cloud")
    pinata_gateway: str = os.getenv("PINATA_GATEWAY", "https://gateway.pinata.cloud")
    pinata_max_attempts: int = int(os.getenv("PINATA_MAX_ATTEMPTS", "3"))
    pinata_timeout_s: float = float(os.getenv("PINATA_TIMEOUT_S", "30"))
    pinata_backoff_base_s: float = float(os.getenv("PINATA_BACKOFF_BASE_S", "1.0"))
    max_upload_size_mb: int = int(os.getenv("MAX_UPLOAD_SIZE_MB", "10"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "true").lower() == "true"

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


settings = Settings()


@dataclass(frozen=True)
class PinataCredentials:
    api_key: str
    api_secret: str

    def headers(self) -> dict[str, str]:
        return {
            "pinata_api_key": self.api_key,
            "pinata_secret_api_key": self.api_secret,
        }


def get_pinata_credentials() -> PinataCredentials:
    # Secrets are looked up per request so they can rotate without a restart.
    api_key = os.getenv("PINATA_API_KEY", "")
    api_secret = os.getenv("PINATA_SECRET_API_KEY", "")
    if not api_key or not api_secret:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Pinata credentials not configured",
        )
    return PinataCredentials(api_key=api_key, api_secret=api_secret)
