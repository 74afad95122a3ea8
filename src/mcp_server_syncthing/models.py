"""Pydantic argument models for the Syncthing tools.

Tool arguments arrive as an untyped JSON object.  Each tool narrows them with
one of these models before any request is made; validation is strict so a
number never passes for a folder ID.
"""

from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from mcp_server_syncthing.errors import ValidationError

P = TypeVar("P", bound="ToolParams")


# ---------------------------------------------------------------------------
#  Base model
# ---------------------------------------------------------------------------


class ToolParams(BaseModel):
    """Base for all tool argument models — tools that take no arguments use it directly."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)
    required_message: ClassVar[str] = "invalid arguments"


# ---------------------------------------------------------------------------
#  Folder-scoped models
# ---------------------------------------------------------------------------


class FolderParams(ToolParams):
    """Tool that targets a single folder."""

    required_message: ClassVar[str] = "folder parameter is required"
    folder: str = Field(..., description="Folder ID")


class FileInfoParams(ToolParams):
    required_message: ClassVar[str] = "folder and file parameters are required"
    folder: str = Field(..., description="Folder ID")
    file: str = Field(..., description="Relative path to file within folder")


class ScanFolderParams(FolderParams):
    sub: str | None = Field(
        None,
        description="Optional subfolder path to scan (relative to folder root)",
    )

    @field_validator("sub", mode="before")
    @classmethod
    def _non_string_sub_is_absent(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


# ---------------------------------------------------------------------------
#  Helpers
# ---------------------------------------------------------------------------


def parse_arguments(model: type[P], arguments: Mapping[str, Any] | None) -> P:
    """Validate a raw argument mapping into ``model``.

    Raises ValidationError with the model's ``required_message`` when a
    required argument is missing or mistyped.  Nothing else is checked:
    empty strings pass, and a non-string ``sub`` is dropped.
    """
    try:
        return model.model_validate(dict(arguments) if arguments else {})
    except (pydantic.ValidationError, TypeError, ValueError) as exc:
        raise ValidationError(model.required_message) from exc


def input_schema(model: type[ToolParams]) -> dict[str, Any]:
    """JSON schema advertised to MCP clients for ``model``."""
    properties = {
        name: {"type": "string", "description": field.description or name}
        for name, field in model.model_fields.items()
    }
    required = [name for name, field in model.model_fields.items() if field.is_required()]
    return {"type": "object", "properties": properties, "required": required}
