"""Messages sent by the server: requests, notifications and results."""

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, ValidationInfo, ValidatorFunctionWrapHandler, WrapValidator
from pydantic_core import PydanticCustomError

from mcp_schema.protocol.base import EmptyResult, NotificationParams, match_first_shape
from mcp_schema.protocol.common import CancelledNotification, PingRequest, ProgressNotification
from mcp_schema.protocol.completion import CompleteResult
from mcp_schema.protocol.elicitation import ElicitationCreateResult
from mcp_schema.protocol.initialization import InitializeResult
from mcp_schema.protocol.jsonrpc import JSONRPCNotification, JSONRPCRequest, JSONRPCResponse, method_of
from mcp_schema.protocol.logging import LoggingMessageParams
from mcp_schema.protocol.prompts import GetPromptResult, ListPromptsResult
from mcp_schema.protocol.resources import (
    ListResourcesResult,
    ListResourceTemplatesResult,
    ReadResourceResult,
    ResourceUpdatedParams,
)
from mcp_schema.protocol.roots import ListRootsParams
from mcp_schema.protocol.sampling import CreateMessageParams
from mcp_schema.protocol.tools import CallToolResult, ListToolsResult


# =============================================================================
# Server Requests
# =============================================================================


class CreateMessageRequest(JSONRPCRequest[CreateMessageParams]):
    method: Literal["sampling/createMessage"] = "sampling/createMessage"


class ListRootsRequest(JSONRPCRequest[ListRootsParams]):
    method: Literal["roots/list"] = "roots/list"
    params: ListRootsParams = Field(default_factory=ListRootsParams)


ServerRequest = Annotated[
    Union[
        Annotated[PingRequest, Tag("ping")],
        Annotated[CreateMessageRequest, Tag("sampling/createMessage")],
        Annotated[ListRootsRequest, Tag("roots/list")],
    ],
    Discriminator(
        method_of,
        custom_error_type="unsupported_method",
        custom_error_message="Unsupported server request method",
    ),
]


# =============================================================================
# Server Notifications
# =============================================================================


class LoggingMessageNotification(JSONRPCNotification[LoggingMessageParams]):
    method: Literal["notifications/message"] = "notifications/message"


class ResourceUpdatedNotification(JSONRPCNotification[ResourceUpdatedParams]):
    method: Literal["notifications/resources/updated"] = "notifications/resources/updated"


class ResourceListChangedNotification(JSONRPCNotification[NotificationParams]):
    method: Literal["notifications/resources/list_changed"] = "notifications/resources/list_changed"
    params: NotificationParams = Field(default_factory=NotificationParams)


class ToolListChangedNotification(JSONRPCNotification[NotificationParams]):
    method: Literal["notifications/tools/list_changed"] = "notifications/tools/list_changed"
    params: NotificationParams = Field(default_factory=NotificationParams)


class PromptListChangedNotification(JSONRPCNotification[NotificationParams]):
    method: Literal["notifications/prompts/list_changed"] = "notifications/prompts/list_changed"
    params: NotificationParams = Field(default_factory=NotificationParams)


ServerNotification = Annotated[
    Union[
        Annotated[CancelledNotification, Tag("notifications/cancelled")],
        Annotated[ProgressNotification, Tag("notifications/progress")],
        Annotated[LoggingMessageNotification, Tag("notifications/message")],
        Annotated[ResourceUpdatedNotification, Tag("notifications/resources/updated")],
        Annotated[ResourceListChangedNotification, Tag("notifications/resources/list_changed")],
        Annotated[ToolListChangedNotification, Tag("notifications/tools/list_changed")],
        Annotated[PromptListChangedNotification, Tag("notifications/prompts/list_changed")],
    ],
    Discriminator(
        method_of,
        custom_error_type="unsupported_method",
        custom_error_message="Unsupported server notification method",
    ),
]


# =============================================================================
# Server Results
# =============================================================================

# Trial order. Every shape but the last has a required field EmptyResult
# lacks; trying EmptyResult earlier would absorb all of them. A result that
# satisfies two shapes (say a ``content`` array next to ``tools``) resolves
# to whichever comes first here.
SERVER_RESULT_SHAPES = (
    InitializeResult,
    CompleteResult,
    GetPromptResult,
    ListPromptsResult,
    ListResourcesResult,
    ListResourceTemplatesResult,
    ReadResourceResult,
    CallToolResult,
    ListToolsResult,
    ElicitationCreateResult,
    EmptyResult,
)


def _resolve_server_result(
    value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
) -> Any:
    result = match_first_shape(SERVER_RESULT_SHAPES, value, info.context)
    if result is None:
        raise PydanticCustomError(
            "no_matching_result_shape", "Result matches no known server result shape"
        )
    return result


ServerResult = Annotated[
    Union[
        InitializeResult,
        CompleteResult,
        GetPromptResult,
        ListPromptsResult,
        ListResourcesResult,
        ListResourceTemplatesResult,
        ReadResourceResult,
        CallToolResult,
        ListToolsResult,
        ElicitationCreateResult,
        EmptyResult,
    ],
    WrapValidator(_resolve_server_result),
]

ServerResponse = JSONRPCResponse[ServerResult]
