"""
Tool - abstract base class for every invocable capability.

Provides common infrastructure:
- Advertisement (name, description) for the handshake
- Parameter validation against an optional JSON schema
- Wrapping handler output into a ToolResponse
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

import jsonschema
from pydantic import ValidationError

from .errors import MalformedRequest, SerializationFailure
from .protocol import Tool, ToolResponse

Handler = Callable[[Any], str]


class BaseTool(ABC):
    """
    Abstract base class for tools.

    Subclasses set ``name`` (and optionally ``description`` and
    ``parameters_schema``) and implement ``execute``.
    """

    name: str
    description: Optional[str] = None
    parameters_schema: Optional[Dict[str, Any]] = None

    def spec(self) -> Tool:
        """Return the advertisement used in the handshake."""
        return Tool(name=self.name, description=self.description)

    def validate_parameters(self, parameters: Any) -> None:
        """
        Validate parameters against ``parameters_schema`` when one is declared.

        Raises:
            MalformedRequest: If the parameters do not match the schema
        """
        if self.parameters_schema is None:
            return
        try:
            jsonschema.validate(parameters, self.parameters_schema)
        except jsonschema.ValidationError as schema_error:
            raise MalformedRequest(
                f"Parameters do not match schema: {schema_error.message}",
                details={"tool": self.name},
            ) from schema_error

    def invoke(self, parameters: Any) -> ToolResponse:
        """Validate parameters, run the handler and wrap its text."""
        self.validate_parameters(parameters)
        content = self.execute(parameters)
        try:
            return ToolResponse(content=content)
        except ValidationError as exc:
            raise SerializationFailure(
                f"{self.name} returned {type(content).__name__}, expected text",
                details={"tool": self.name},
            ) from exc

    @abstractmethod
    def execute(self, parameters: Any) -> str:
        """
        Execute tool logic.

        Args:
            parameters: Tool-specific input (pre-validated)

        Returns:
            Textual result

        Raises:
            ToolExecutionError: If the tool cannot produce a result
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class FunctionTool(BaseTool):
    """Tool that delegates to a plain handler function."""

    def __init__(
        self,
        name: str,
        handler: Handler,
        description: Optional[str] = None,
        parameters_schema: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.name = name
        self.description = description
        self.parameters_schema = parameters_schema
        self._handler = handler

    def execute(self, parameters: Any) -> str:
        return self._handler(parameters)
