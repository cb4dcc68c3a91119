"""
Pytest configuration and fixtures.

Provides:
- A registry with the built-in tools and a fixed clock
- In-memory streams that record flushes
- Line-oriented stream doubles for transport failures
"""

import io
from datetime import date
from typing import List

import pytest

from bio_mcp.registry import ToolRegistry
from bio_mcp.tools import DateTool, PingTool

FIXED_TODAY = date(2024, 3, 9)


class RecordingStream(io.StringIO):
    """StringIO that remembers how much had been written at each flush."""

    def __init__(self) -> None:
        super().__init__()
        self.flushes: List[str] = []

    def flush(self) -> None:
        self.flushes.append(self.getvalue())
        super().flush()


class BrokenInput:
    """Yields the given lines, then fails as a stream with undecodable bytes."""

    def __init__(self, lines: List[str]) -> None:
        self._lines = list(lines)

    def readline(self) -> str:
        if self._lines:
            return self._lines.pop(0)
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


@pytest.fixture
def fixed_today() -> date:
    return FIXED_TODAY


@pytest.fixture
def registry() -> ToolRegistry:
    """Fresh registry with ping and a date tool pinned to FIXED_TODAY."""
    tools = ToolRegistry()
    tools.register(PingTool())
    tools.register(DateTool(clock=lambda: FIXED_TODAY))
    return tools


@pytest.fixture
def output_stream() -> RecordingStream:
    return RecordingStream()


@pytest.fixture
def broken_input():
    return BrokenInput
