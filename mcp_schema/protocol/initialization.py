"""Capability negotiation: the ``initialize`` handshake."""

from typing import Any

from mcp_schema.protocol.base import MCPModel, RequestParams, Result


class Implementation(MCPModel):
    """Name and version of an MCP implementation."""

    name: str
    version: str


# =============================================================================
# Client Capabilities
# =============================================================================


class RootsCapability(MCPModel):
    """Whether the client sends notifications when its roots change."""

    list_changed: bool | None = None


class ClientCapabilities(MCPModel):
    """Capabilities a client may support."""

    experimental: dict[str, Any] | None = None
    roots: RootsCapability | None = None
    sampling: dict[str, Any] | None = None


# =============================================================================
# Server Capabilities
# =============================================================================


class PromptsCapability(MCPModel):
    list_changed: bool | None = None


class ResourcesCapability(MCPModel):
    subscribe: bool | None = None
    list_changed: bool | None = None


class ToolsCapability(MCPModel):
    list_changed: bool | None = None


class ServerCapabilities(MCPModel):
    """Capabilities a server may support."""

    experimental: dict[str, Any] | None = None
    logging: dict[str, Any] | None = None
    prompts: PromptsCapability | None = None
    resources: ResourcesCapability | None = None
    tools: ToolsCapability | None = None


# =============================================================================
# Initialize
# =============================================================================


class InitializeParams(RequestParams):
    """Parameters for the initialize request (client -> server)."""

    protocol_version: str
    capabilities: ClientCapabilities
    client_info: Implementation


class InitializeResult(Result):
    """Result returned by the server after an initialize request."""

    protocol_version: str
    capabilities: ServerCapabilities
    server_info: Implementation
    instructions: str | None = None
