"""HTTP client for the configured Syncthing instance."""

import json
import logging
from typing import Any

import httpx

from mcp_server_syncthing.config import SyncthingConfig
from mcp_server_syncthing.errors import ApiError, ParseError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


class SyncthingClient:
    """Issue one authenticated REST request per call against Syncthing."""

    def __init__(self, config: SyncthingConfig) -> None:
        self.config = config
        self.url = config.api_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "X-API-Key": self.config.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def call(self, endpoint: str, method: str = "GET", body: Any = None) -> Any:
        """Send ``method`` to ``endpoint`` (path plus query) and return the decoded body.

        An empty response body decodes to ``{}``.

        Raises:
            ValueError: ``method`` is not one Syncthing's REST API uses.
            ApiError: the response status is not 2xx.
            ParseError: the response body is not valid JSON.
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        content = None
        if body is not None and method != "GET":
            content = json.dumps(body)

        logger.debug("%s %s", method, endpoint)
        async with httpx.AsyncClient(timeout=self.config.timeout) as client:
            resp = await client.request(
                method,
                f"{self.url}{endpoint}",
                headers=self._headers(),
                content=content,
            )

        if not resp.is_success:
            raise ApiError(resp.status_code, resp.reason_phrase)

        # Some endpoints (scan, restart) answer with an empty body.
        text = resp.text
        if not text:
            return {}
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON from Syncthing at {endpoint}: {exc}") from exc
