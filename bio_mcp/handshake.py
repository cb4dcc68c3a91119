"""Handshake emitter: announces the tool registry before any request is read."""

from __future__ import annotations

from typing import TextIO

from .core.logging import get_logger
from .errors import SerializationFailure
from .protocol import PROTOCOL_VERSION, Handshake
from .registry import ToolRegistry

logger = get_logger(__name__)


def build_handshake(registry: ToolRegistry) -> Handshake:
    """Snapshot the registry into a Handshake."""
    return Handshake(version=PROTOCOL_VERSION, tools=registry.list_tools())


def emit_handshake(registry: ToolRegistry, stream: TextIO) -> Handshake:
    """
    Write the handshake as a single flushed line and freeze the registry.

    The line is fully serialized before anything is written, so a failure
    leaves the stream untouched.

    Raises:
        SerializationFailure: If the handshake cannot be built or encoded
        RuntimeError: If a handshake was already emitted for this registry
    """
    if registry.frozen:
        raise RuntimeError("Handshake already emitted for this registry")

    try:
        handshake = build_handshake(registry)
        line = handshake.to_wire()
    except Exception as exc:
        logger.error("Handshake serialization failed", error=str(exc))
        raise SerializationFailure(f"Could not serialize handshake: {exc}") from exc

    stream.write(line + "\n")
    stream.flush()
    registry.freeze()

    logger.info(
        "Handshake emitted",
        version=handshake.version,
        tools=[tool.name for tool in handshake.tools],
    )
    return handshake
