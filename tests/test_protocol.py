"""Tests for the wire contracts."""

import json

import pytest
from pydantic import ValidationError

from bio_mcp.errors import ErrorCode, MalformedRequest
from bio_mcp.protocol import (
    PROTOCOL_VERSION,
    ErrorResponse,
    Handshake,
    Tool,
    ToolCall,
    ToolError,
    ToolResponse,
)


class TestToolSerialization:

    def test_tool_without_description_omits_key(self):
        """A tool with no description serializes without a description key."""
        assert Tool(name="ping").to_wire() == '{"name":"ping"}'

    def test_tool_with_description(self):
        """The description is emitted verbatim."""
        wire = json.loads(Tool(name="ping", description="A simple test tool").to_wire())
        assert wire == {"name": "ping", "description": "A simple test tool"}

    def test_tool_name_must_not_be_empty(self):
        with pytest.raises(ValidationError):
            Tool(name="")

    def test_tool_is_immutable(self):
        tool = Tool(name="ping")
        with pytest.raises(ValidationError):
            tool.name = "pong"


class TestHandshakeSerialization:

    def test_handshake_wire_shape(self):
        """Handshake serializes version and tools in order."""
        handshake = Handshake(
            version="1.0",
            tools=[Tool(name="ping", description="A simple test tool"), Tool(name="date")],
        )
        wire = handshake.to_wire()

        assert "\n" not in wire
        assert '"version":"1.0"' in wire
        assert json.loads(wire) == {
            "version": "1.0",
            "tools": [
                {"name": "ping", "description": "A simple test tool"},
                {"name": "date"},
            ],
        }

    def test_default_version(self):
        assert Handshake().version == PROTOCOL_VERSION == "1.0"

    def test_duplicate_tool_names_rejected(self):
        """A handshake never carries two tools with the same name."""
        with pytest.raises(ValidationError, match="duplicate tool name"):
            Handshake(tools=[Tool(name="ping"), Tool(name="ping", description="again")])


class TestToolCall:

    def test_deserialize_camel_case(self):
        """Structured request deserializes with tool_name populated."""
        call = ToolCall.from_wire('{"toolName":"date","parameters":{}}')
        assert call.tool_name == "date"
        assert call.parameters == {}

    def test_deserialize_arbitrary_parameters(self):
        raw = """{
            "toolName": "date",
            "parameters": {
                "format": "YYYY-MM-DD",
                "nested": {"list": [1, 2.5, true, null, "x"]}
            }
        }"""
        call = ToolCall.from_wire(raw)
        assert call.parameters == {
            "format": "YYYY-MM-DD",
            "nested": {"list": [1, 2.5, True, None, "x"]},
        }

    def test_non_mapping_parameters_accepted(self):
        call = ToolCall.from_wire('{"toolName":"ping","parameters":[1,"two"]}')
        assert call.parameters == [1, "two"]

    def test_parameters_default_to_empty_mapping(self):
        assert ToolCall.from_wire('{"toolName":"ping"}').parameters == {}

    def test_snake_case_key_accepted(self):
        assert ToolCall.from_wire('{"tool_name":"ping","parameters":{}}').tool_name == "ping"

    def test_serializes_with_camel_case(self):
        call = ToolCall(tool_name="date", parameters={"format": "YYYY-MM-DD"})
        assert json.loads(call.to_wire()) == {"toolName": "date", "parameters": {"format": "YYYY-MM-DD"}}

    @pytest.mark.parametrize(
        "raw",
        [
            '{"parameters":{}}',
            '{"toolName":42,"parameters":{}}',
            '{"toolName":null}',
            '["date"]',
            '"date"',
            "date",
            "",
            '{"toolName":"date",',
        ],
    )
    def test_malformed_requests(self, raw):
        """Anything without a string toolName at the top level is malformed."""
        with pytest.raises(MalformedRequest) as exc_info:
            ToolCall.from_wire(raw)
        assert exc_info.value.code is ErrorCode.MALFORMED_REQUEST
        assert isinstance(exc_info.value, ValueError)

    def test_from_mapping(self):
        assert ToolCall.from_mapping({"toolName": "ping"}).tool_name == "ping"
        with pytest.raises(MalformedRequest):
            ToolCall.from_mapping({"tool": "ping"})


class TestResponses:

    def test_tool_response_exact_wire(self):
        """A pong response is exactly the compact content object."""
        assert ToolResponse(content="pong").to_wire() == '{"content":"pong"}'

    def test_error_response_exact_wire(self):
        response = ErrorResponse(error=ToolError(code=ErrorCode.UNKNOWN_TOOL, message="unknown command"))
        assert response.to_wire() == '{"error":{"code":"UNKNOWN_TOOL","message":"unknown command"}}'

    def test_error_response_with_details(self):
        error = ToolError(code=ErrorCode.MALFORMED_REQUEST, message="bad", details={"tool": "date"})
        assert ErrorResponse(error=error).to_wire() == (
            '{"error":{"code":"MALFORMED_REQUEST","message":"bad","details":{"tool":"date"}}}'
        )

    def test_malformed_request_keeps_validation_errors(self):
        with pytest.raises(MalformedRequest) as exc_info:
            ToolCall.from_wire('{"toolName":42}')
        errors = exc_info.value.details["errors"]
        assert errors[0]["loc"] == ("toolName",)
        assert "input" not in errors[0] and "ctx" not in errors[0]
