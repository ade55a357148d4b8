"""Typed Model Context Protocol (2024-11-05) messages."""

from mcp_schema.protocol.base import (
    JSONRPC_VERSION,
    LATEST_PROTOCOL_VERSION,
    Annotations,
    Cursor,
    EmptyResult,
    MCPModel,
    NotificationParams,
    PaginatedParams,
    PaginatedResult,
    ProgressToken,
    RequestId,
    RequestMeta,
    RequestParams,
    Result,
    Role,
    WireModel,
    parse_progress_token,
    parse_request_id,
)
from mcp_schema.protocol.client import (
    CallToolRequest,
    ClientNotification,
    ClientRequest,
    ClientResponse,
    ClientResult,
    CompleteRequest,
    ElicitationCreateRequest,
    GetPromptRequest,
    InitializedNotification,
    InitializeRequest,
    ListPromptsRequest,
    ListResourcesRequest,
    ListResourceTemplatesRequest,
    ListToolsRequest,
    ReadResourceRequest,
    RootsListChangedNotification,
    SetLevelRequest,
    SubscribeRequest,
    UnsubscribeRequest,
)
from mcp_schema.protocol.common import (
    CancelledNotification,
    CancelledNotificationParams,
    PingParams,
    PingRequest,
    ProgressNotification,
    ProgressNotificationParams,
)
from mcp_schema.protocol.completion import (
    CompleteArgument,
    CompleteParams,
    CompleteResult,
    CompletionData,
    PromptReference,
    Reference,
    ResourceReference,
)
from mcp_schema.protocol.content import (
    BlobResourceContents,
    EmbeddedResource,
    ImageContent,
    PromptContent,
    ResourceContents,
    SamplingContent,
    TextContent,
    TextResourceContents,
    resolve_prompt_content,
    resolve_resource_contents,
    resolve_sampling_content,
)
from mcp_schema.protocol.dispatch import (
    MISSING,
    dispatch,
    resolve_client_result,
    resolve_result,
    validate_message,
)
from mcp_schema.protocol.elicitation import (
    ElicitationAction,
    ElicitationCreateParams,
    ElicitationCreateResult,
)
from mcp_schema.protocol.initialization import (
    ClientCapabilities,
    Implementation,
    InitializeParams,
    InitializeResult,
    PromptsCapability,
    ResourcesCapability,
    RootsCapability,
    ServerCapabilities,
    ToolsCapability,
)
from mcp_schema.protocol.jsonrpc import (
    ErrorData,
    JSONRPCError,
    JSONRPCMessage,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    RawNotification,
    RawRequest,
    RawResponse,
)
from mcp_schema.protocol.logging import LoggingLevel, LoggingMessageParams, SetLevelParams
from mcp_schema.protocol.prompts import (
    GetPromptParams,
    GetPromptResult,
    ListPromptsResult,
    Prompt,
    PromptArgument,
    PromptMessage,
)
from mcp_schema.protocol.resources import (
    ListResourcesResult,
    ListResourceTemplatesResult,
    ReadResourceParams,
    ReadResourceResult,
    Resource,
    ResourceTemplate,
    ResourceUpdatedParams,
    SubscribeParams,
    UnsubscribeParams,
)
from mcp_schema.protocol.roots import ListRootsParams, ListRootsResult, Root
from mcp_schema.protocol.sampling import (
    CreateMessageParams,
    CreateMessageResult,
    IncludeContext,
    ModelHint,
    ModelPreferences,
    SamplingMessage,
)
from mcp_schema.protocol.server import (
    CreateMessageRequest,
    ListRootsRequest,
    LoggingMessageNotification,
    PromptListChangedNotification,
    ResourceListChangedNotification,
    ResourceUpdatedNotification,
    ServerNotification,
    ServerRequest,
    ServerResponse,
    ServerResult,
    ToolListChangedNotification,
)
from mcp_schema.protocol.tools import (
    CallToolParams,
    CallToolResult,
    ListToolsResult,
    Tool,
    ToolAnnotations,
    ToolInputSchema,
)

__all__ = [
    # base
    "JSONRPC_VERSION",
    "LATEST_PROTOCOL_VERSION",
    "Annotations",
    "Cursor",
    "EmptyResult",
    "MCPModel",
    "NotificationParams",
    "PaginatedParams",
    "PaginatedResult",
    "ProgressToken",
    "RequestId",
    "RequestMeta",
    "RequestParams",
    "Result",
    "Role",
    "WireModel",
    "parse_progress_token",
    "parse_request_id",
    # envelopes
    "ErrorData",
    "JSONRPCError",
    "JSONRPCMessage",
    "JSONRPCNotification",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "RawNotification",
    "RawRequest",
    "RawResponse",
    # content
    "BlobResourceContents",
    "EmbeddedResource",
    "ImageContent",
    "PromptContent",
    "ResourceContents",
    "SamplingContent",
    "TextContent",
    "TextResourceContents",
    "resolve_prompt_content",
    "resolve_resource_contents",
    "resolve_sampling_content",
    # payloads
    "CallToolParams",
    "CallToolResult",
    "CancelledNotificationParams",
    "ClientCapabilities",
    "CompleteArgument",
    "CompleteParams",
    "CompleteResult",
    "CompletionData",
    "CreateMessageParams",
    "CreateMessageResult",
    "ElicitationAction",
    "ElicitationCreateParams",
    "ElicitationCreateResult",
    "GetPromptParams",
    "GetPromptResult",
    "Implementation",
    "IncludeContext",
    "InitializeParams",
    "InitializeResult",
    "ListPromptsResult",
    "ListResourcesResult",
    "ListResourceTemplatesResult",
    "ListRootsParams",
    "ListRootsResult",
    "ListToolsResult",
    "LoggingLevel",
    "LoggingMessageParams",
    "ModelHint",
    "ModelPreferences",
    "PingParams",
    "ProgressNotificationParams",
    "Prompt",
    "PromptArgument",
    "PromptMessage",
    "PromptReference",
    "PromptsCapability",
    "ReadResourceParams",
    "ReadResourceResult",
    "Reference",
    "Resource",
    "ResourceReference",
    "ResourcesCapability",
    "ResourceTemplate",
    "ResourceUpdatedParams",
    "Root",
    "RootsCapability",
    "SamplingMessage",
    "ServerCapabilities",
    "SetLevelParams",
    "SubscribeParams",
    "Tool",
    "ToolAnnotations",
    "ToolInputSchema",
    "ToolsCapability",
    "UnsubscribeParams",
    # messages
    "CallToolRequest",
    "CancelledNotification",
    "ClientNotification",
    "ClientRequest",
    "ClientResponse",
    "ClientResult",
    "CompleteRequest",
    "CreateMessageRequest",
    "ElicitationCreateRequest",
    "GetPromptRequest",
    "InitializedNotification",
    "InitializeRequest",
    "ListPromptsRequest",
    "ListResourcesRequest",
    "ListResourceTemplatesRequest",
    "ListRootsRequest",
    "ListToolsRequest",
    "LoggingMessageNotification",
    "PingRequest",
    "ProgressNotification",
    "PromptListChangedNotification",
    "ReadResourceRequest",
    "ResourceListChangedNotification",
    "ResourceUpdatedNotification",
    "RootsListChangedNotification",
    "ServerNotification",
    "ServerRequest",
    "ServerResponse",
    "ServerResult",
    "SetLevelRequest",
    "SubscribeRequest",
    "ToolListChangedNotification",
    "UnsubscribeRequest",
    # dispatch
    "MISSING",
    "dispatch",
    "resolve_client_result",
    "resolve_result",
    "validate_message",
]
