"""
Wire contracts for the capability handshake and tool invocation.

Defines the message types exchanged with the caller:
- Tool: one advertised capability
- Handshake: the capability announcement sent once at startup
- ToolCall / ToolResponse: structured invocation messages
- ToolError / ErrorResponse: response-level error reporting

All models serialize with camelCase keys and drop absent optional fields.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, JsonValue, StrictStr, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .errors import ErrorCode, MalformedRequest

PROTOCOL_VERSION = "1.0"


class ProtocolMode(str, Enum):
    """Framing used by the dispatch loop."""
    LINE = "line"      # Plain text, one tool name per line
    JSON = "json"      # One ToolCall JSON object per line


class WireModel(BaseModel):
    """Base model with camelCase aliases on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> str:
        """Serialize to compact JSON, omitting fields that are None."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Tool(WireModel):
    """Tool advertisement - name and optional description."""
    name: str = Field(..., min_length=1, description="Unique tool identifier (e.g., 'ping')")
    description: Optional[str] = Field(None, description="Human-readable purpose of the tool")


class Handshake(WireModel):
    """Capability announcement emitted before any request is processed."""
    version: str = Field(PROTOCOL_VERSION, description="Protocol version")
    tools: List[Tool] = Field(default_factory=list, description="Registered tools in registration order")

    @field_validator("tools")
    @classmethod
    def _unique_names(cls, tools: List[Tool]) -> List[Tool]:
        seen = set()
        for tool in tools:
            if tool.name in seen:
                raise ValueError(f"duplicate tool name '{tool.name}'")
            seen.add(tool.name)
        return tools


class ToolCall(WireModel):
    """Request to invoke a tool by name with free-form parameters."""
    tool_name: StrictStr = Field(..., description="Name of the tool to invoke")
    parameters: JsonValue = Field(default_factory=dict, description="Tool-specific input, schema not fixed")

    @classmethod
    def from_wire(cls, raw: Union[str, bytes]) -> "ToolCall":
        """Parse a JSON request line, raising MalformedRequest on any shape error."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise _malformed(exc) from exc

    @classmethod
    def from_mapping(cls, data: object) -> "ToolCall":
        """Validate an already decoded request."""
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise _malformed(exc) from exc


class ToolResponse(WireModel):
    """Textual result of a successful invocation."""
    content: str


class ToolError(WireModel):
    """Standardized response-level error."""
    code: ErrorCode = Field(..., description="Standardized error code")
    message: str = Field(..., description="Human readable message")
    details: Optional[Dict[str, Any]] = Field(None, description="Debug details, omitted when empty")


class ErrorResponse(WireModel):
    """Envelope for ToolError on the wire."""
    error: ToolError


def _malformed(exc: ValidationError) -> MalformedRequest:
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    return MalformedRequest(_describe(exc), details={"errors": errors})


def _describe(exc: ValidationError) -> str:
    first = exc.errors(include_url=False)[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "request"
    return f"Invalid request at '{location}': {first.get('msg', 'invalid value')}"
