from __future__ import annotations

from dataclasses import dataclass
import os

from .errors import ConfigError

DEFAULT_API_ENDPOINT = "http://0.0.0.0:1234/v1"
DEFAULT_TIMEOUT = 60.0

API_KEY_ENV = "TUPLELEAP_AI_API_KEY"
API_ENDPOINT_ENV = "API_URL_V1"
ORGANIZATION_ENV = "TUPLELEAP_AI_ORGANIZATION"


def resolve_endpoint(explicit: str | None = None) -> str:
    base = explicit or os.getenv(API_ENDPOINT_ENV) or DEFAULT_API_ENDPOINT
    return base.rstrip("/")


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for :class:`leap_connect.Client`."""

    api_key: str
    api_endpoint: str = DEFAULT_API_ENDPOINT
    organization: str | None = None
    proxy: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        api_endpoint: str | None = None,
        organization: str | None = None,
        proxy: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "ClientConfig":
        """Build a config from the environment; keyword arguments win."""
        key = api_key or os.getenv(API_KEY_ENV)
        if not key:
            raise ConfigError(f"{API_KEY_ENV} is not set and no api_key was given")
        return cls(
            api_key=key,
            api_endpoint=resolve_endpoint(api_endpoint),
            organization=organization or os.getenv(ORGANIZATION_ENV) or None,
            proxy=proxy,
            timeout=timeout,
        )
