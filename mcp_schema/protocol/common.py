"""Messages either peer may send: ping, cancellation and progress."""

from typing import Literal

from pydantic import Field

from mcp_schema.protocol.base import NotificationParams, ProgressToken, RequestId, RequestParams
from mcp_schema.protocol.jsonrpc import JSONRPCNotification, JSONRPCRequest


class PingParams(RequestParams):
    """Parameters for ``ping``. Generally empty."""


class CancelledNotificationParams(NotificationParams):
    """Cancels a previously issued request; the request id is never reused."""

    request_id: RequestId
    reason: str | None = None


class ProgressNotificationParams(NotificationParams):
    """Progress of a long-running request identified by its progress token."""

    progress_token: ProgressToken
    progress: float
    total: float | None = None


class PingRequest(JSONRPCRequest[PingParams]):
    method: Literal["ping"] = "ping"
    params: PingParams = Field(default_factory=PingParams)


class CancelledNotification(JSONRPCNotification[CancelledNotificationParams]):
    method: Literal["notifications/cancelled"] = "notifications/cancelled"


class ProgressNotification(JSONRPCNotification[ProgressNotificationParams]):
    method: Literal["notifications/progress"] = "notifications/progress"
