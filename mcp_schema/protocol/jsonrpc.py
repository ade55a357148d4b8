"""JSON-RPC 2.0 envelopes, generic over their payload type."""

from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import ConfigDict, Field

from mcp_schema.protocol.base import JSONRPC_VERSION, MCPModel, RequestId, WireModel

ParamsT = TypeVar("ParamsT")
ResultT = TypeVar("ResultT")

# Every member a JSON-RPC 2.0 message may carry
ENVELOPE_KEYS = frozenset({"jsonrpc", "id", "method", "params", "result", "error"})


class JSONRPCMessage(WireModel):
    """Fields common to every JSON-RPC message. Envelopes are closed."""

    model_config = ConfigDict(extra="forbid")

    json_rpc: Literal["2.0"] = Field(default=JSONRPC_VERSION, alias="jsonrpc")


class JSONRPCRequest(JSONRPCMessage, Generic[ParamsT]):
    """A request that expects a response."""

    id: RequestId
    method: str
    params: ParamsT


class JSONRPCNotification(JSONRPCMessage, Generic[ParamsT]):
    """A notification which does not expect a response."""

    method: str
    params: ParamsT


class JSONRPCResponse(JSONRPCMessage, Generic[ResultT]):
    """A successful (non-error) response to a request."""

    id: RequestId
    result: ResultT


class ErrorData(MCPModel):
    """Error information in a JSON-RPC error response."""

    code: int
    message: str
    data: Any = None


class JSONRPCError(JSONRPCMessage):
    """A response to a request that indicates an error occurred.

    ``id`` is ``None`` (rendered as ``null``) only when the failing request's
    id could not be determined, e.g. for a parse error.
    """

    id: Optional[RequestId]
    error: ErrorData


# Envelopes with an untyped payload, as produced by ``codec.decode``
RawParams = Optional[dict[str, Any]]


class RawRequest(JSONRPCRequest[RawParams]):
    params: RawParams = None


class RawNotification(JSONRPCNotification[RawParams]):
    params: RawParams = None


RawResponse = JSONRPCResponse[Any]


def method_of(value: Any) -> str | None:
    """Read the ``method`` member of a raw message or an envelope model."""
    if isinstance(value, dict):
        method = value.get("method")
    else:
        method = getattr(value, "method", None)
    return method if isinstance(method, str) else None
