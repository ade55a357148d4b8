"""Tests for the domain payload types."""

import pytest
from pydantic import ValidationError

from mcp_schema.codec import deserialize
from mcp_schema.protocol import (
    CallToolResult,
    CompleteParams,
    ElicitationCreateRequest,
    ElicitationCreateResult,
    PromptReference,
    ResourceReference,
    SetLevelParams,
    Tool,
)


class TestTools:
    """Tests for tool definitions and results."""

    def test_tool_with_annotations(self):
        """Test that title, output schema and behaviour hints are read."""
        tool = Tool.from_wire(
            {
                "name": "test_tool",
                "title": "Test Tool",
                "description": "A test tool",
                "inputSchema": {
                    "type": "object",
                    "properties": {"input": {"type": "string"}},
                },
                "outputSchema": {
                    "type": "object",
                    "properties": {"result": {"type": "string"}},
                },
                "annotations": {
                    "readOnlyHint": True,
                    "destructiveHint": False,
                    "idempotentHint": True,
                    "openWorldHint": False,
                },
            }
        )

        assert tool.name == "test_tool"
        assert tool.title == "Test Tool"
        assert tool.output_schema is not None
        assert tool.annotations.read_only_hint is True
        assert tool.annotations.destructive_hint is False

    def test_tool_without_newer_fields(self):
        """Test that tools without title, output schema or annotations still parse."""
        tool = Tool.from_wire(
            {"name": "old_tool", "description": "An old tool", "inputSchema": {"type": "object"}}
        )

        assert tool.name == "old_tool"
        assert tool.title is None
        assert tool.output_schema is None
        assert tool.annotations is None

    def test_input_schema_requires_type(self):
        """Test that an input schema without ``type`` is rejected."""
        with pytest.raises(ValidationError):
            Tool.from_wire({"name": "t", "inputSchema": {"properties": {}}})

    def test_call_tool_result_with_structured_content(self):
        """Test that structured content and the error flag are read."""
        result = CallToolResult.from_wire(
            {
                "content": [{"type": "text", "text": "Result text"}],
                "structuredContent": {"temperature": 22.5, "humidity": 65},
                "isError": False,
            }
        )

        assert len(result.content) == 1
        assert result.is_error is False
        assert result.structured_content["temperature"] == 22.5
        assert result.structured_content["humidity"] == 65

    def test_call_tool_result_without_structured_content(self):
        """Test that plain content-only results still parse."""
        result = CallToolResult.from_wire({"content": [{"type": "text", "text": "Result"}]})
        assert result.structured_content is None


class TestElicitation:
    """Tests for elicitation requests and results."""

    def test_elicitation_create_request(self, as_bytes):
        """Test that elicitation/create carries a message and a schema."""
        message = {
            "jsonrpc": "2.0",
            "method": "elicitation/create",
            "id": 1,
            "params": {
                "message": "Please provide your email",
                "requestedSchema": {
                    "type": "object",
                    "properties": {"email": {"type": "string", "format": "email"}},
                    "required": ["email"],
                },
            },
        }
        request = deserialize(as_bytes(message))

        assert isinstance(request, ElicitationCreateRequest)
        assert request.params.message == "Please provide your email"
        assert isinstance(request.params.requested_schema, dict)

    def test_accept_result(self):
        """Test that an accepted elicitation carries content."""
        result = ElicitationCreateResult.from_wire(
            {"action": "accept", "content": {"email": "user@example.com"}}
        )
        assert result.action == "accept"
        assert result.content == {"email": "user@example.com"}

    def test_reject_result(self):
        """Test that a rejected elicitation has no content."""
        result = ElicitationCreateResult.from_wire({"action": "reject"})
        assert result.action == "reject"
        assert result.content is None

    def test_unknown_action(self):
        """Test that actions outside accept, reject and cancel fail."""
        with pytest.raises(ValidationError):
            ElicitationCreateResult.from_wire({"action": "maybe"})


class TestCompletion:
    """Tests for completion references."""

    def test_prompt_reference(self):
        """Test that ``ref/prompt`` references are read by name."""
        params = CompleteParams.from_wire(
            {"ref": {"type": "ref/prompt", "name": "greet"}, "argument": {"name": "a", "value": "b"}}
        )
        assert isinstance(params.ref, PromptReference)

    def test_resource_reference(self):
        """Test that ``ref/resource`` references are read by uri."""
        params = CompleteParams.from_wire(
            {
                "ref": {"type": "ref/resource", "uri": "file:///{path}"},
                "argument": {"name": "path", "value": "sr"},
            }
        )
        assert isinstance(params.ref, ResourceReference)
        assert params.ref.uri == "file:///{path}"


class TestLogging:
    """Tests for logging levels."""

    @pytest.mark.parametrize(
        "level",
        ["debug", "info", "notice", "warning", "error", "critical", "alert", "emergency"],
    )
    def test_syslog_levels(self, level):
        """Test that all eight syslog severities are accepted."""
        assert SetLevelParams.from_wire({"level": level}).level == level

    def test_unknown_level(self):
        """Test that other level names fail."""
        with pytest.raises(ValidationError):
            SetLevelParams.from_wire({"level": "trace"})
