"""Text formatters for Syncthing API responses and tool errors.

Responses are passed through as received: the only shaping is the field
projection used by the folder and device listings.
"""

import json
from collections.abc import Iterable
from typing import Any

import httpx

from mcp_server_syncthing.errors import ParseError, SyncthingMCPError

ERROR_PREFIX = "[ERROR]"

FOLDER_FIELDS = ("id", "label", "path", "type")
DEVICE_FIELDS = ("deviceID", "name", "addresses")


def fmt(data: Any) -> str:
    """Pretty-print JSON with 2-space indent, keeping key order as received."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def project(items: Any, fields: Iterable[str]) -> list[dict[str, Any]]:
    """Keep only ``fields`` from each element of a listing, preserving order.

    Fields an element lacks are omitted rather than reported as null.
    """
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        raise ParseError("Expected a JSON array of objects from Syncthing")
    fields = tuple(fields)
    return [{key: item[key] for key in fields if key in item} for item in items]


def scan_confirmation(folder: str, sub: str | None = None) -> str:
    text = f"Scan triggered for folder: {folder}"
    if sub:
        text += f" (subfolder: {sub})"
    return text


def describe_error(e: Exception, url: str = "") -> str:
    """Human-readable message for an error raised while running a tool."""
    if isinstance(e, SyncthingMCPError):
        return str(e)
    if isinstance(e, httpx.ConnectError):
        return f"Cannot connect to Syncthing at {url}. Is it running?"
    if isinstance(e, httpx.TimeoutException):
        return "Request timed out. Syncthing may be busy or unreachable."
    return f"{type(e).__name__}: {e}"


def error_text(e: Exception, url: str = "") -> str:
    return f"{ERROR_PREFIX} {describe_error(e, url)}"
