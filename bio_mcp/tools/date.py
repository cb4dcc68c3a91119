"""Current local date tool."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Dict, Optional

from ..core.logging import get_logger
from ..errors import ToolExecutionError
from ..tool import BaseTool

logger = get_logger(__name__)

ISO_FORMAT = "YYYY-MM-DD"


class DateTool(BaseTool):
    """
    Returns today's local date.

    The optional ``format`` parameter is either ``"YYYY-MM-DD"`` (the default,
    ISO calendar date) or a ``strftime`` pattern.
    """

    name = "date"
    description = "Responds with the current date."
    parameters_schema: Optional[Dict[str, Any]] = {
        "type": "object",
        "properties": {
            "format": {"type": "string", "description": "YYYY-MM-DD or a strftime pattern"},
        },
    }

    def __init__(self, clock: Callable[[], date] = date.today) -> None:
        self._clock = clock

    def execute(self, parameters: Any) -> str:
        fmt = parameters.get("format", ISO_FORMAT)
        today = self._clock()
        if fmt == ISO_FORMAT:
            return today.isoformat()
        try:
            return today.strftime(fmt)
        except ValueError as exc:
            logger.warning("Invalid date format", format=fmt, error=str(exc))
            raise ToolExecutionError(f"Invalid date format '{fmt}'", details={"format": fmt}) from exc
