"""Error taxonomy for the handshake/dispatch protocol."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """
    Standardized error codes reported to callers.

    Taxonomy:
    - MALFORMED_REQUEST: Input could not be interpreted as a request
    - UNKNOWN_TOOL: Requested tool is not registered
    - SERIALIZATION_FAILURE: A response could not be encoded to the wire form
    - EXECUTION_ERROR: The tool handler failed
    """
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    SERIALIZATION_FAILURE = "SERIALIZATION_FAILURE"
    EXECUTION_ERROR = "EXECUTION_ERROR"


class ProtocolError(Exception):
    """Base class for protocol-level failures."""

    code: ErrorCode = ErrorCode.MALFORMED_REQUEST

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details or {}


class MalformedRequest(ProtocolError, ValueError):
    """Raised when input cannot be interpreted as a valid request."""

    code = ErrorCode.MALFORMED_REQUEST


class TransportError(MalformedRequest):
    """Raised when the input stream itself cannot be decoded as text."""


class UnknownTool(ProtocolError, LookupError):
    """Raised when the requested tool is not registered."""

    code = ErrorCode.UNKNOWN_TOOL

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool '{tool_name}' is not registered", details={"tool": tool_name})
        self.tool_name = tool_name


class SerializationFailure(ProtocolError):
    """Raised when a handshake or response cannot be encoded."""

    code = ErrorCode.SERIALIZATION_FAILURE


class ToolExecutionError(RuntimeError):
    """Raised by a tool handler when it fails to produce a result."""

    code = ErrorCode.EXECUTION_ERROR

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.details = details or {}
