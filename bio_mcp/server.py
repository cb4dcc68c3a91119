"""
Stdio server entrypoint.

Wires settings, logging, the built-in tool registry, the handshake emitter
and the command dispatcher together.

Usage:
    bio-mcp-server [--protocol line|json] [--log-level LEVEL] [--json-logs]
    python -m bio_mcp
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO, Union

from .core.config import get_settings
from .core.logging import get_logger, setup_logging
from .dispatcher import UNKNOWN_COMMAND, CommandDispatcher
from .errors import SerializationFailure, TransportError
from .handshake import emit_handshake
from .protocol import ProtocolMode
from .registry import ToolRegistry
from .tools import build_default_registry
from .transport import LineSource, Utf8LineReader

logger = get_logger(__name__)


def run(
    registry: ToolRegistry,
    input_stream: LineSource,
    output_stream: TextIO,
    *,
    mode: Union[ProtocolMode, str] = ProtocolMode.LINE,
    unknown_reply: str = UNKNOWN_COMMAND,
) -> int:
    """Emit the handshake, serve until end of input and return an exit status."""
    try:
        emit_handshake(registry, output_stream)
    except SerializationFailure as exc:
        logger.error("Startup aborted", error=str(exc))
        return 1

    dispatcher = CommandDispatcher(registry, mode=mode, unknown_reply=unknown_reply)
    try:
        handled = dispatcher.serve(input_stream, output_stream)
    except TransportError as exc:
        logger.error("Transport failure, shutting down", error=str(exc), requests=dispatcher.handled)
        return 1

    logger.info("Server stopped", requests=handled)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bio-mcp-server",
        description="Line-oriented tool server speaking over stdin/stdout.",
    )
    parser.add_argument(
        "--protocol",
        choices=[mode.value for mode in ProtocolMode],
        default=None,
        help="Request framing (default: BIO_MCP_PROTOCOL or 'line')",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for stderr output (default: BIO_MCP_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Render log records as JSON",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    setup_logging(
        level=args.log_level or settings.log_level,
        json_logs=args.json_logs or settings.json_logs,
    )

    registry = build_default_registry()
    stdin = Utf8LineReader(sys.stdin.buffer)
    return run(
        registry,
        stdin,
        sys.stdout,
        mode=args.protocol or settings.protocol,
        unknown_reply=settings.unknown_reply,
    )
