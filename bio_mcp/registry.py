"""Tool registry: an ordered table of tools keyed by exact name."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.logging import get_logger
from .errors import UnknownTool
from .protocol import Tool
from .tool import BaseTool, FunctionTool, Handler

logger = get_logger(__name__)


class ToolRegistry:
    """
    In-memory registry of tools.

    Tools keep their registration order. Once frozen (after the handshake
    has been emitted) the registry rejects further registrations.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, BaseTool] = {}
        self._frozen = False

    def register(self, tool: BaseTool) -> BaseTool:
        """Register a tool implementation."""
        if self._frozen:
            raise RuntimeError(f"Cannot register '{tool.name}': registry is frozen")
        if not tool.name:
            raise ValueError("Tool name must not be empty")
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        logger.info("Registered tool", tool=tool.name)
        return tool

    def register_function(
        self,
        name: str,
        handler: Handler,
        description: Optional[str] = None,
        parameters_schema: Optional[Dict[str, Any]] = None,
    ) -> BaseTool:
        """Register a ``(name, handler)`` pair."""
        return self.register(FunctionTool(name, handler, description, parameters_schema))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, tool_name: str) -> BaseTool:
        """Return the tool registered under exactly ``tool_name`` or raise UnknownTool."""
        tool = self._tools.get(tool_name)
        if tool is None:
            raise UnknownTool(tool_name)
        return tool

    def list_tools(self) -> List[Tool]:
        """Return tool advertisements in registration order."""
        return [tool.spec() for tool in self._tools.values()]
