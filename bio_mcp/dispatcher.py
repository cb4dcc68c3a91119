"""
Command dispatcher - the request/response loop.

Reads one line at a time, resolves it against the tool registry with a single
uniform lookup, invokes the tool and writes exactly one response line.

Two framings are supported:
- JSON mode: each line is a ToolCall, answered with a ToolResponse or an
  ErrorResponse. Protocol failures never end the session.
- Line mode: each trimmed line is a tool name, answered with the tool's text
  or the fixed unknown-command reply.

End of input terminates the loop normally. Input that cannot be decoded as
text raises TransportError, which is fatal.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Optional, TextIO, Union

from .core.logging import get_logger
from .errors import (
    ErrorCode,
    MalformedRequest,
    ProtocolError,
    SerializationFailure,
    ToolExecutionError,
    TransportError,
    UnknownTool,
)
from .protocol import ErrorResponse, ProtocolMode, ToolCall, ToolError, ToolResponse
from .registry import ToolRegistry
from .transport import LineSource

logger = get_logger(__name__)

UNKNOWN_COMMAND = "unknown command"


class DispatcherState(str, Enum):
    AWAITING_LINE = "awaiting_line"
    TERMINATED = "terminated"


class CommandDispatcher:
    """Main-loop component owning routing, parsing and error policy."""

    def __init__(
        self,
        registry: ToolRegistry,
        *,
        mode: Union[ProtocolMode, str] = ProtocolMode.LINE,
        unknown_reply: str = UNKNOWN_COMMAND,
    ) -> None:
        self._registry = registry
        self.mode = ProtocolMode(mode)
        self.unknown_reply = unknown_reply
        self.state = DispatcherState.AWAITING_LINE
        self.handled = 0
        self._handlers: Dict[ProtocolMode, Callable[[str], str]] = {
            ProtocolMode.LINE: self._handle_text,
            ProtocolMode.JSON: self._handle_json,
        }

    def serve(self, input_stream: LineSource, output_stream: TextIO) -> int:
        """
        Run until end of input.

        Returns:
            Number of requests answered

        Raises:
            TransportError: If a line cannot be decoded as text
        """
        self.state = DispatcherState.AWAITING_LINE
        while self.state is DispatcherState.AWAITING_LINE:
            try:
                line = input_stream.readline()
            except UnicodeDecodeError as exc:
                self.state = DispatcherState.TERMINATED
                logger.error("Input stream is not valid text", error=str(exc), requests=self.handled)
                raise TransportError(f"Could not decode input line: {exc}") from exc

            if not line:
                self.state = DispatcherState.TERMINATED
                logger.info("End of input stream", requests=self.handled)
                break

            reply = self.handle_line(line)
            output_stream.write(reply + "\n")
            output_stream.flush()
            self.handled += 1

        return self.handled

    def handle_line(self, line: str) -> str:
        """Produce the single response line for one input line."""
        return self._handlers[self.mode](line)

    def _handle_text(self, line: str) -> str:
        command = line.strip()
        try:
            tool = self._registry.resolve(command)
        except UnknownTool:
            logger.info("Unknown command", command=command)
            return self.unknown_reply

        try:
            response = tool.invoke({})
        except (ProtocolError, ToolExecutionError) as exc:
            logger.warning("Tool invocation failed", tool=tool.name, code=exc.code.value, error=str(exc))
            return _single_line(f"error: {exc}")
        except Exception as exc:
            logger.error("Tool invocation crashed", tool=tool.name, error=str(exc), exc_info=True)
            return _single_line(f"error: {exc}")

        return _single_line(response.content)

    def _handle_json(self, line: str) -> str:
        tool_name = None
        try:
            call = ToolCall.from_wire(line)
            tool_name = call.tool_name
            tool = self._registry.resolve(call.tool_name)
            response = tool.invoke(call.parameters)
        except UnknownTool as exc:
            logger.info("Unknown tool", tool=exc.tool_name)
            return self._error(ErrorCode.UNKNOWN_TOOL, self.unknown_reply, exc.details)
        except MalformedRequest as exc:
            logger.warning("Malformed request", tool=tool_name, error=str(exc))
            return self._error(exc.code, str(exc), exc.details)
        except (ProtocolError, ToolExecutionError) as exc:
            logger.warning("Tool invocation failed", tool=tool_name, code=exc.code.value, error=str(exc))
            return self._error(exc.code, str(exc), exc.details)
        except Exception as exc:
            logger.error("Tool invocation crashed", tool=tool_name, error=str(exc), exc_info=True)
            return self._error(
                ErrorCode.EXECUTION_ERROR,
                f"Tool execution failed: {exc}",
                {"exc_type": type(exc).__name__},
            )

        try:
            return _encode(response)
        except SerializationFailure as exc:
            logger.error("Response serialization failed", tool=tool_name, error=str(exc))
            return self._error(exc.code, str(exc), exc.details)

    def _error(self, code: ErrorCode, message: str, details: Optional[Dict[str, Any]] = None) -> str:
        try:
            return ErrorResponse(error=ToolError(code=code, message=message, details=details or None)).to_wire()
        except Exception as exc:
            logger.warning("Error details not serializable, dropping them", code=code.value, error=str(exc))
            return ErrorResponse(error=ToolError(code=code, message=message)).to_wire()


def _encode(response: ToolResponse) -> str:
    try:
        return response.to_wire()
    except Exception as exc:
        raise SerializationFailure(f"Could not serialize response: {exc}") from exc


def _single_line(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n")

