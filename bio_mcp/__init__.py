"""
Stdio tool server.

Announces a fixed set of tools with a one-line handshake, then answers one
line per input line until the input stream ends.

Usage:
    from bio_mcp import CommandDispatcher, emit_handshake
    from bio_mcp.tools import build_default_registry

    registry = build_default_registry()
    registry.register_function("echo", lambda params: params.get("text", ""))
    emit_handshake(registry, sys.stdout)
    CommandDispatcher(registry).serve(sys.stdin, sys.stdout)
"""

from .dispatcher import CommandDispatcher, DispatcherState
from .errors import (
    ErrorCode,
    MalformedRequest,
    ProtocolError,
    SerializationFailure,
    ToolExecutionError,
    TransportError,
    UnknownTool,
)
from .handshake import build_handshake, emit_handshake
from .protocol import (
    PROTOCOL_VERSION,
    ErrorResponse,
    Handshake,
    ProtocolMode,
    Tool,
    ToolCall,
    ToolError,
    ToolResponse,
)
from .registry import ToolRegistry
from .tool import BaseTool, FunctionTool

__all__ = [
    "PROTOCOL_VERSION",
    "BaseTool",
    "CommandDispatcher",
    "DispatcherState",
    "ErrorCode",
    "ErrorResponse",
    "FunctionTool",
    "Handshake",
    "MalformedRequest",
    "ProtocolError",
    "ProtocolMode",
    "SerializationFailure",
    "Tool",
    "ToolCall",
    "ToolError",
    "ToolExecutionError",
    "ToolRegistry",
    "ToolResponse",
    "TransportError",
    "UnknownTool",
    "build_handshake",
    "emit_handshake",
]

__version__ = "0.1.0"
