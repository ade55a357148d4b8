"""Messages sent by the client: requests, notifications and results."""

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, ValidationInfo, ValidatorFunctionWrapHandler, WrapValidator
from pydantic_core import PydanticCustomError

from mcp_schema.protocol.base import EmptyResult, NotificationParams, PaginatedParams, match_first_shape
from mcp_schema.protocol.common import CancelledNotification, PingRequest, ProgressNotification
from mcp_schema.protocol.completion import CompleteParams
from mcp_schema.protocol.elicitation import ElicitationCreateParams
from mcp_schema.protocol.initialization import InitializeParams
from mcp_schema.protocol.jsonrpc import JSONRPCNotification, JSONRPCRequest, JSONRPCResponse, method_of
from mcp_schema.protocol.logging import SetLevelParams
from mcp_schema.protocol.prompts import GetPromptParams
from mcp_schema.protocol.resources import ReadResourceParams, SubscribeParams, UnsubscribeParams
from mcp_schema.protocol.roots import ListRootsResult
from mcp_schema.protocol.sampling import CreateMessageResult
from mcp_schema.protocol.tools import CallToolParams


# =============================================================================
# Client Requests
# =============================================================================


class InitializeRequest(JSONRPCRequest[InitializeParams]):
    method: Literal["initialize"] = "initialize"


class CompleteRequest(JSONRPCRequest[CompleteParams]):
    method: Literal["completion/complete"] = "completion/complete"


class SetLevelRequest(JSONRPCRequest[SetLevelParams]):
    method: Literal["logging/setLevel"] = "logging/setLevel"


class GetPromptRequest(JSONRPCRequest[GetPromptParams]):
    method: Literal["prompts/get"] = "prompts/get"


class ListPromptsRequest(JSONRPCRequest[PaginatedParams]):
    method: Literal["prompts/list"] = "prompts/list"


class ListResourcesRequest(JSONRPCRequest[PaginatedParams]):
    method: Literal["resources/list"] = "resources/list"


class ListResourceTemplatesRequest(JSONRPCRequest[PaginatedParams]):
    method: Literal["resources/templates/list"] = "resources/templates/list"


class ReadResourceRequest(JSONRPCRequest[ReadResourceParams]):
    method: Literal["resources/read"] = "resources/read"


class SubscribeRequest(JSONRPCRequest[SubscribeParams]):
    method: Literal["resources/subscribe"] = "resources/subscribe"


class UnsubscribeRequest(JSONRPCRequest[UnsubscribeParams]):
    method: Literal["resources/unsubscribe"] = "resources/unsubscribe"


class CallToolRequest(JSONRPCRequest[CallToolParams]):
    method: Literal["tools/call"] = "tools/call"


class ListToolsRequest(JSONRPCRequest[PaginatedParams]):
    method: Literal["tools/list"] = "tools/list"


class ElicitationCreateRequest(JSONRPCRequest[ElicitationCreateParams]):
    method: Literal["elicitation/create"] = "elicitation/create"


ClientRequest = Annotated[
    Union[
        Annotated[PingRequest, Tag("ping")],
        Annotated[InitializeRequest, Tag("initialize")],
        Annotated[CompleteRequest, Tag("completion/complete")],
        Annotated[SetLevelRequest, Tag("logging/setLevel")],
        Annotated[GetPromptRequest, Tag("prompts/get")],
        Annotated[ListPromptsRequest, Tag("prompts/list")],
        Annotated[ListResourcesRequest, Tag("resources/list")],
        Annotated[ListResourceTemplatesRequest, Tag("resources/templates/list")],
        Annotated[ReadResourceRequest, Tag("resources/read")],
        Annotated[SubscribeRequest, Tag("resources/subscribe")],
        Annotated[UnsubscribeRequest, Tag("resources/unsubscribe")],
        Annotated[CallToolRequest, Tag("tools/call")],
        Annotated[ListToolsRequest, Tag("tools/list")],
        Annotated[ElicitationCreateRequest, Tag("elicitation/create")],
    ],
    Discriminator(
        method_of,
        custom_error_type="unsupported_method",
        custom_error_message="Unsupported client request method",
    ),
]


# =============================================================================
# Client Notifications
# =============================================================================


class InitializedNotification(JSONRPCNotification[NotificationParams]):
    method: Literal["notifications/initialized"] = "notifications/initialized"
    params: NotificationParams = Field(default_factory=NotificationParams)


class RootsListChangedNotification(JSONRPCNotification[NotificationParams]):
    method: Literal["notifications/roots/list_changed"] = "notifications/roots/list_changed"
    params: NotificationParams = Field(default_factory=NotificationParams)


ClientNotification = Annotated[
    Union[
        Annotated[CancelledNotification, Tag("notifications/cancelled")],
        Annotated[ProgressNotification, Tag("notifications/progress")],
        Annotated[InitializedNotification, Tag("notifications/initialized")],
        Annotated[RootsListChangedNotification, Tag("notifications/roots/list_changed")],
    ],
    Discriminator(
        method_of,
        custom_error_type="unsupported_method",
        custom_error_message="Unsupported client notification method",
    ),
]


# =============================================================================
# Client Results
# =============================================================================

# Trial order; EmptyResult has no required fields and must stay last
CLIENT_RESULT_SHAPES = (
    CreateMessageResult,
    ListRootsResult,
    EmptyResult,
)


def _resolve_client_result(
    value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
) -> Any:
    result = match_first_shape(CLIENT_RESULT_SHAPES, value, info.context)
    if result is None:
        raise PydanticCustomError(
            "no_matching_result_shape", "Result matches no known client result shape"
        )
    return result


ClientResult = Annotated[
    Union[CreateMessageResult, ListRootsResult, EmptyResult],
    WrapValidator(_resolve_client_result),
]

ClientResponse = JSONRPCResponse[ClientResult]
