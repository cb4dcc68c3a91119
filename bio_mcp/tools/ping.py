"""Liveness check tool."""

from __future__ import annotations

from typing import Any

from ..tool import BaseTool


class PingTool(BaseTool):
    """Always answers 'pong'."""

    name = "ping"
    description = "Responds with 'pong'."

    def execute(self, parameters: Any) -> str:
        return "pong"
