"""Built-in tools."""

from ..registry import ToolRegistry
from .date import DateTool
from .ping import PingTool


def build_default_registry() -> ToolRegistry:
    """Return a fresh registry holding the built-in tools in advertisement order."""
    registry = ToolRegistry()
    registry.register(PingTool())
    registry.register(DateTool())
    return registry


__all__ = ["DateTool", "PingTool", "build_default_registry"]
