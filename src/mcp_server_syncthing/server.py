"""MCP server wiring — expose a ToolDispatcher over stdio or streamable HTTP."""

import contextlib
import logging
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from mcp_server_syncthing import __version__
from mcp_server_syncthing.auth import BearerAuthMiddleware
from mcp_server_syncthing.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-server-syncthing"


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server and register the list-tools and call-tool handlers."""
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return dispatcher.list_tools()

    # Argument checking belongs to the dispatcher so that its error messages
    # reach the caller unchanged.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await dispatcher.invoke(name, arguments)

    return server


async def run_stdio(server: Server, api_url: str) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Syncthing MCP Server running")
        logger.info("API URL: %s", api_url)
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def create_http_app(server: Server, token: str | None = None) -> Starlette:
    """Starlette app serving the MCP endpoint at ``/mcp`` plus ``/health``.

    When ``token`` is given every request except the health check must carry
    it as a bearer token.
    """
    session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

    async def handle_mcp(scope, receive, send) -> None:
        await session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        async with session_manager.run():
            yield

    app = Starlette(
        routes=[
            Route("/health", health, methods=["GET"]),
            Mount("/mcp", app=handle_mcp),
        ],
        lifespan=lifespan,
    )
    if token:
        app.add_middleware(BearerAuthMiddleware, token=token)
    return app
