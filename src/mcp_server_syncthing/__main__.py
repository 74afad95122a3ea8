"""Entry point for `python -m mcp_server_syncthing` and the `mcp-server-syncthing` console script."""

import logging
import os
import sys

import anyio

from mcp_server_syncthing.client import SyncthingClient
from mcp_server_syncthing.config import load_config
from mcp_server_syncthing.dispatcher import ToolDispatcher
from mcp_server_syncthing.errors import ConfigurationError
from mcp_server_syncthing.server import create_http_app, create_server, run_stdio

logger = logging.getLogger("mcp_server_syncthing")


def configure_logging() -> None:
    """Send log lines to stderr; stdout carries the stdio protocol.

    Raises ConfigurationError for an unknown MCP_LOG_LEVEL, after falling
    back to INFO so the error can still be reported.
    """
    level = os.environ.get("MCP_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    valid = isinstance(logging.getLevelName(level), int)
    logging.basicConfig(
        level=level if valid else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )
    if not valid:
        raise ConfigurationError(f"Invalid MCP_LOG_LEVEL: {level!r}")


def main() -> None:
    try:
        configure_logging()
        config = load_config()
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)

    server = create_server(ToolDispatcher(SyncthingClient(config)))
    transport = os.environ.get("MCP_TRANSPORT", "stdio").strip().lower()

    try:
        if transport == "streamable-http":
            _run_http(server, config.api_url)
        else:
            anyio.run(run_stdio, server, config.api_url)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.critical("Server failed: %s", e)
        sys.exit(1)


def _run_http(server, api_url: str) -> None:
    """Start the streamable HTTP server with optional bearer-token auth."""
    import uvicorn

    host = os.environ.get("MCP_HOST", "0.0.0.0")
    port = int(os.environ.get("MCP_PORT", "8000"))
    token = os.environ.get("MCP_AUTH_TOKEN", "").strip()

    if token:
        logger.info("Bearer-token authentication enabled")
    else:
        logger.warning("MCP_AUTH_TOKEN not set — server is unauthenticated")
    logger.info("Syncthing MCP Server listening on %s:%d (streamable-http)", host, port)
    logger.info("API URL: %s", api_url)
    uvicorn.run(create_http_app(server, token or None), host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
