"""Tool registry and dispatcher.

Every tool is one ``ToolSpec`` entry in ``TOOLS``: its name, description,
argument model and handler.  A handler turns validated arguments into exactly
one Syncthing request and returns the text shown to the caller.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import mcp.types as types

from mcp_server_syncthing.client import SyncthingClient
from mcp_server_syncthing.errors import UnknownToolError
from mcp_server_syncthing.formatters import (
    DEVICE_FIELDS,
    FOLDER_FIELDS,
    error_text,
    fmt,
    project,
    scan_confirmation,
)
from mcp_server_syncthing.models import (
    FileInfoParams,
    FolderParams,
    ScanFolderParams,
    ToolParams,
    input_schema,
    parse_arguments,
)

logger = logging.getLogger(__name__)

Handler = Callable[[SyncthingClient, Any], Awaitable[str]]

READ_ONLY = types.ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=False,
)


def encode(value: str) -> str:
    """Percent-encode a query value the way JavaScript's encodeURIComponent does."""
    return quote(value, safe="!*'()")


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    params: type[ToolParams]
    handler: Handler
    annotations: types.ToolAnnotations | None = None

    def descriptor(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=input_schema(self.params),
            annotations=self.annotations or READ_ONLY,
        )


# =====================================================================
#  Handlers
# =====================================================================


async def get_status(client: SyncthingClient, params: ToolParams) -> str:
    return fmt(await client.call("/rest/system/status"))


async def list_folders(client: SyncthingClient, params: ToolParams) -> str:
    folders = await client.call("/rest/config/folders")
    return fmt(project(folders, FOLDER_FIELDS))


async def get_folder_status(client: SyncthingClient, params: FolderParams) -> str:
    return fmt(await client.call(f"/rest/db/status?folder={encode(params.folder)}"))


async def get_folder_errors(client: SyncthingClient, params: FolderParams) -> str:
    return fmt(await client.call(f"/rest/folder/errors?folder={encode(params.folder)}"))


async def get_file_info(client: SyncthingClient, params: FileInfoParams) -> str:
    endpoint = f"/rest/db/file?folder={encode(params.folder)}&file={encode(params.file)}"
    return fmt(await client.call(endpoint))


async def scan_folder(client: SyncthingClient, params: ScanFolderParams) -> str:
    endpoint = f"/rest/db/scan?folder={encode(params.folder)}"
    if params.sub:
        endpoint += f"&sub={encode(params.sub)}"
    # Syncthing answers a scan request with an empty body.
    await client.call(endpoint, "POST")
    return scan_confirmation(params.folder, params.sub)


async def list_devices(client: SyncthingClient, params: ToolParams) -> str:
    devices = await client.call("/rest/config/devices")
    return fmt(project(devices, DEVICE_FIELDS))


async def get_connections(client: SyncthingClient, params: ToolParams) -> str:
    return fmt(await client.call("/rest/system/connections"))


# =====================================================================
#  Registry
# =====================================================================

TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        "get_status",
        "Get overall Syncthing system status including version, uptime, and system info",
        ToolParams,
        get_status,
    ),
    ToolSpec(
        "list_folders",
        "List all configured folders with their IDs, labels, and paths",
        ToolParams,
        list_folders,
    ),
    ToolSpec(
        "get_folder_status",
        "Get detailed status of a specific folder including sync state, errors, and byte counts",
        FolderParams,
        get_folder_status,
    ),
    ToolSpec(
        "get_folder_errors",
        "Get list of errors for a specific folder",
        FolderParams,
        get_folder_errors,
    ),
    ToolSpec(
        "get_file_info",
        "Get detailed information about a specific file including local and global versions",
        FileInfoParams,
        get_file_info,
    ),
    ToolSpec(
        "scan_folder",
        "Trigger a scan of a folder or subfolder to detect changes",
        ScanFolderParams,
        scan_folder,
        types.ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    ),
    ToolSpec(
        "list_devices",
        "List all configured devices with their IDs and addresses",
        ToolParams,
        list_devices,
    ),
    ToolSpec(
        "get_connections",
        "Get current connection status for all devices",
        ToolParams,
        get_connections,
    ),
)


# =====================================================================
#  Dispatcher
# =====================================================================


class ToolDispatcher:
    """Route tool calls to their handler and wrap the outcome as a tool result."""

    def __init__(self, client: SyncthingClient, tools: tuple[ToolSpec, ...] = TOOLS) -> None:
        self.client = client
        self._tools = {spec.name: spec for spec in tools}
        self._descriptors = [spec.descriptor() for spec in tools]

    def list_tools(self) -> list[types.Tool]:
        return list(self._descriptors)

    async def invoke(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> types.CallToolResult:
        """Run tool ``name``.  Never raises: failures come back as error results."""
        logger.debug("Calling tool %s", name)
        try:
            spec = self._tools.get(name)
            if spec is None:
                raise UnknownToolError(name)
            params = parse_arguments(spec.params, arguments)
            text = await spec.handler(self.client, params)
        except Exception as e:
            logger.warning("Tool %s failed: %s", name, e)
            return types.CallToolResult(
                content=[types.TextContent(type="text", text=error_text(e, self.client.url))],
                isError=True,
            )
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=text)],
            isError=False,
        )
