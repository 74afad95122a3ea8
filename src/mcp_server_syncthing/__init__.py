"""Syncthing MCP Server — expose the Syncthing REST API as MCP tools."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("mcp-server-syncthing")
except PackageNotFoundError:
    __version__ = "1.0.0"  # fallback for editable installs / development
