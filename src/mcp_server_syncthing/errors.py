"""Exception types raised while configuring the server or running a tool."""


class SyncthingMCPError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(SyncthingMCPError):
    """Required configuration is missing or malformed."""


class ValidationError(SyncthingMCPError):
    """Tool arguments are missing or of the wrong type."""


class UnknownToolError(SyncthingMCPError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ApiError(SyncthingMCPError):
    """Syncthing answered with a non-success HTTP status."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(f"Syncthing API error: {status} {reason}")
        self.status = status
        self.reason = reason


class ParseError(SyncthingMCPError):
    """Syncthing returned a body that is not the JSON we expected."""
