"""Process configuration — read the Syncthing connection settings from the environment."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from mcp_server_syncthing.errors import ConfigurationError

DEFAULT_API_URL = "http://localhost:8384"


class SyncthingConfig(BaseModel):
    """Immutable connection settings shared by the client and the dispatcher."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1)
    api_url: str = DEFAULT_API_URL
    timeout: float | None = Field(
        None,
        gt=0,
        description="Seconds before an upstream request is abandoned. None waits forever.",
    )


def load_config(environ: Mapping[str, str] | None = None) -> SyncthingConfig:
    """Build the configuration from environment variables.

      SYNCTHING_API_KEY  - Required. API key for the Syncthing REST API.
      SYNCTHING_API_URL  - Optional. Base URL (default: http://localhost:8384).
                           SYNCTHING_URL is accepted as a fallback.
      SYNCTHING_TIMEOUT  - Optional. Request timeout in seconds.
    """
    env = os.environ if environ is None else environ

    api_key = env.get("SYNCTHING_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("SYNCTHING_API_KEY environment variable is not set")

    api_url = (
        env.get("SYNCTHING_API_URL", "").strip()
        or env.get("SYNCTHING_URL", "").strip()
        or DEFAULT_API_URL
    )

    timeout = None
    raw_timeout = env.get("SYNCTHING_TIMEOUT", "").strip()
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid SYNCTHING_TIMEOUT: {raw_timeout!r} is not a number"
            ) from exc
        if timeout <= 0:
            raise ConfigurationError("SYNCTHING_TIMEOUT must be a positive number of seconds.")

    return SyncthingConfig(api_key=api_key, api_url=api_url.rstrip("/"), timeout=timeout)
