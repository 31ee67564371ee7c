from __future__ import annotations


class APIError(RuntimeError):
    """Base error for every failure surfaced by the client."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class APIStatusError(APIError):
    """The server answered with a 4xx or 5xx status."""


class APIConnectionError(APIError):
    """The request never produced a response (connect, timeout, protocol)."""


class ResponseDecodeError(APIError):
    """The response body could not be decoded into the expected type."""


class ConfigError(APIError):
    """No API key was passed or found in the environment."""
