class RelayError(Exception):
    """Base class for failures while relaying content to the pinning service."""


class RetryExhaustedError(RelayError):
    def __init__(self, attempts: int, last_error: str) -> None:
        super().__init__(f"All {attempts} attempts failed. Last error: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


class PinRejectedError(RelayError):
    """The pinning service answered with a non-success status."""

    def __init__(self, stage: str, status_code: int, body: str) -> None:
        super().__init__(f"{stage} upload failed: {body}")
        self.stage = stage
        self.status_code = status_code
        self.body = body


class PinResponseError(RelayError):
    """The pinning service answered 2xx but the payload carried no content id."""
