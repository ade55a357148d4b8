"""Method dispatch and result resolution.

A raw message is routed to its typed variant by the exact, case-sensitive
``method`` string; results carry no method and are resolved by trying the
known result shapes in a fixed order.
"""

from typing import Any, Final, Literal, get_args

from pydantic import TypeAdapter, ValidationError

from mcp_schema.errors import MalformedEnvelope, from_validation_error
from mcp_schema.protocol.base import JSONRPC_VERSION, WIRE_CONTEXT, parse_request_id
from mcp_schema.protocol.client import ClientNotification, ClientRequest, ClientResult
from mcp_schema.protocol.server import ServerNotification, ServerRequest, ServerResult

MessageKind = Literal["client_request", "client_notification", "server_request", "server_notification"]

_UNIONS: Final[dict[str, Any]] = {
    "client_request": ClientRequest,
    "client_notification": ClientNotification,
    "server_request": ServerRequest,
    "server_notification": ServerNotification,
}

_ADAPTERS: Final[dict[str, TypeAdapter]] = {kind: TypeAdapter(union) for kind, union in _UNIONS.items()}


def _methods_of(union: Any) -> frozenset[str]:
    # Annotated[Union[Annotated[Model, Tag], ...], Discriminator]
    members = get_args(get_args(union)[0])
    return frozenset(get_args(member)[0].model_fields["method"].default for member in members)


METHODS: Final[dict[str, frozenset[str]]] = {
    kind: _methods_of(union) for kind, union in _UNIONS.items()
}
"""The closed method set of each message kind."""

_server_result = TypeAdapter(ServerResult)
_client_result = TypeAdapter(ClientResult)


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()
"""Marks an absent ``params`` member, as opposed to an explicit ``null``."""


def _validate(adapter: TypeAdapter, data: Any) -> Any:
    try:
        return adapter.validate_python(data, context=WIRE_CONTEXT)
    except ValidationError as e:
        raise from_validation_error(e) from e


def _adapter_for(kind: str) -> TypeAdapter:
    try:
        return _ADAPTERS[kind]
    except KeyError:
        raise ValueError(f"Unknown message kind: {kind!r}") from None


def validate_message(kind: MessageKind, message: dict[str, Any]) -> Any:
    """Validate a raw request or notification object as the typed ``kind`` variant.

    Raises:
        MCPSchemaError: ``UnsupportedMethod`` when the method is outside the
            kind's method set, ``MalformedEnvelope`` when the method belongs
            to the sibling kind (a notification sent with an id, or a
            request without one), otherwise the most specific payload error.
    """
    adapter = _adapter_for(kind)
    method = message.get("method")
    if isinstance(method, str) and method not in METHODS[kind]:
        if kind.endswith("_request"):
            if method in METHODS[kind.replace("_request", "_notification")]:
                raise MalformedEnvelope(f"Notification '{method}' must not carry an id")
        elif method in METHODS[kind.replace("_notification", "_request")]:
            raise MalformedEnvelope(f"Request '{method}' must carry an id")
    return _validate(adapter, message)


def dispatch(
    kind: MessageKind,
    method: str,
    params: Any = MISSING,
    id: Any = None,
) -> Any:
    """
    Build the typed variant for ``method`` from its raw params.

    Args:
        kind: Which dispatch union to resolve against.
        method: The JSON-RPC method string.
        params: Raw params object; leave as ``MISSING`` when the message has none.
        id: Request id. Required for requests, forbidden for notifications.

    Returns:
        The request or notification model for ``method``.
    """
    _adapter_for(kind)  # unknown kinds fail before the envelope checks
    message: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION}

    if kind.endswith("_request"):
        if id is None:
            raise MalformedEnvelope(f"Request '{method}' must carry an id")
        message["id"] = parse_request_id(id)
    elif id is not None:
        raise MalformedEnvelope(f"Notification '{method}' must not carry an id")

    message["method"] = method
    if params is not MISSING:
        message["params"] = params

    return validate_message(kind, message)


def resolve_result(raw: Any) -> Any:
    """Resolve a raw result object sent by a server to its first matching shape.

    Raises:
        NoMatchingResultShape: If no server result shape accepts ``raw``.
    """
    return _validate(_server_result, raw)


def resolve_client_result(raw: Any) -> Any:
    """Resolve a raw result object sent by a client (an answer to a server request)."""
    return _validate(_client_result, raw)
