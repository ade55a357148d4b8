"""Tools the server exposes to the client."""

from typing import Any

from mcp_schema.protocol.base import MCPModel, PaginatedResult, RequestParams, Result
from mcp_schema.protocol.content import PromptContent


class ToolInputSchema(MCPModel):
    """JSON Schema for a tool's arguments.

    Carried as data only; keywords other than the ones below are kept as
    extra keys.
    """

    type: str
    properties: dict[str, Any] | None = None
    required: list[str] | None = None


class ToolAnnotations(MCPModel):
    """Hints describing a tool's behaviour. None of them are guarantees."""

    title: str | None = None
    read_only_hint: bool | None = None
    destructive_hint: bool | None = None
    idempotent_hint: bool | None = None
    open_world_hint: bool | None = None


class Tool(MCPModel):
    """Definition of a tool the client can call."""

    name: str
    title: str | None = None
    description: str | None = None
    input_schema: ToolInputSchema
    output_schema: dict[str, Any] | None = None
    annotations: ToolAnnotations | None = None


class ListToolsResult(PaginatedResult):
    tools: list[Tool]


class CallToolParams(RequestParams):
    """Parameters for ``tools/call``."""

    name: str
    arguments: dict[str, Any] | None = None


class CallToolResult(Result):
    """Result of a tool call.

    Tool failures are reported in-band with ``is_error`` set, not as a
    JSON-RPC error.
    """

    content: list[PromptContent]
    structured_content: Any | None = None
    is_error: bool | None = None
