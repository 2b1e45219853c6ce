import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from pinning_relay.common.config import settings
from pinning_relay.common.errors import RetryExhaustedError

logger = logging.getLogger(__name__)

_sleep = asyncio.sleep


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    base_delay_s: float = 1.0
    timeout_s: float = 30.0

    def delay_for(self, attempt_index: int) -> float:
        return (2**attempt_index) * self.base_delay_s


def default_policy() -> RetryPolicy:
    return RetryPolicy(
        max_attempts=settings.pinata_max_attempts,
        base_delay_s=settings.pinata_backoff_base_s,
        timeout_s=settings.pinata_timeout_s,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    policy: RetryPolicy | None = None,
    headers: dict[str, str] | None = None,
    data: dict[str, Any] | None = None,
    files: dict[str, Any] | None = None,
) -> httpx.Response:
    """Send a request, retrying transport failures with exponential backoff.

    Any HTTP response, including 4xx/5xx, is returned as-is. Only network
    errors and per-attempt timeouts consume the retry budget.
    """
    policy = policy or default_policy()
    last_error = ""
    for index in range(policy.max_attempts):
        attempt = index + 1
        logger.info(
            "pin_attempt",
            extra={"url": url, "attempt": attempt, "max_attempts": policy.max_attempts},
        )
        try:
            return await asyncio.wait_for(
                client.request(method, url, headers=headers, data=data, files=files),
                timeout=policy.timeout_s,
            )
        except asyncio.TimeoutError:
            last_error = f"request timed out after {policy.timeout_s}s"
        except httpx.TransportError as exc:
            last_error = str(exc) or type(exc).__name__

        logger.warning(
            "pin_attempt_failed",
            extra={"url": url, "attempt": attempt, "error": last_error},
        )
        if attempt < policy.max_attempts:
            delay = policy.delay_for(index)
            logger.info("pin_retry_wait", extra={"url": url, "delay_ms": int(delay * 1000)})
            await _sleep(delay)

    raise RetryExhaustedError(policy.max_attempts, last_error)


async def get_http_client():
    async with httpx.AsyncClient(timeout=settings.pinata_timeout_s) as client:
        yield client
