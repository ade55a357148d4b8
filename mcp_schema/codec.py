"""JSON-RPC 2.0 message encoding and decoding."""

import json
from typing import Any, Literal

from pydantic import TypeAdapter, ValidationError

from mcp_schema.config.loader import Settings, get_settings
from mcp_schema.errors import (
    MalformedEnvelope,
    MalformedJson,
    MCPSchemaError,
    from_validation_error,
)
from mcp_schema.protocol.base import WIRE_CONTEXT, WireModel, parse_request_id
from mcp_schema.protocol.client import ClientResponse
from mcp_schema.protocol.dispatch import validate_message
from mcp_schema.protocol.jsonrpc import (
    ENVELOPE_KEYS,
    ErrorData,
    JSONRPCError,
    RawNotification,
    RawRequest,
    RawResponse,
)
from mcp_schema.protocol.server import ServerResponse
from mcp_schema.utils.logging import get_logger

logger = get_logger(__name__)

Sender = Literal["client", "server"]
EnvelopeKind = Literal["request", "notification", "response", "error"]

_raw_response = TypeAdapter(RawResponse)
_responses: dict[str, TypeAdapter] = {
    "client": TypeAdapter(ClientResponse),
    "server": TypeAdapter(ServerResponse),
}


def _reject_constant(name: str) -> Any:
    raise MalformedJson(f"Invalid JSON: {name} is not a JSON value")


def _load_json(data: str | bytes) -> Any:
    try:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return json.loads(data, parse_constant=_reject_constant)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedJson(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise MalformedJson("Invalid JSON: nested too deeply") from e


def _validate(target: Any, data: Any) -> Any:
    try:
        if isinstance(target, TypeAdapter):
            return target.validate_python(data, context=WIRE_CONTEXT)
        return target.model_validate(data, context=WIRE_CONTEXT)
    except ValidationError as e:
        raise from_validation_error(e) from e


def classify_envelope(message: Any) -> EnvelopeKind:
    """
    Check the JSON-RPC envelope of a decoded message and tell what it is.

    Raises:
        MalformedEnvelope: If the envelope breaks JSON-RPC 2.0 framing.
        InvalidIdentifierShape: If the id is not a string or an integer.
    """
    if not isinstance(message, dict):
        raise MalformedEnvelope("JSON-RPC message must be an object")

    unknown = [key for key in message if key not in ENVELOPE_KEYS]
    if unknown:
        raise MalformedEnvelope(f"Unknown envelope member(s): {', '.join(unknown)}")

    if message.get("jsonrpc") != "2.0":
        raise MalformedEnvelope("jsonrpc must be exactly '2.0'")

    has_result = "result" in message
    has_error = "error" in message

    if "method" in message:
        if has_result or has_error:
            raise MalformedEnvelope("A message cannot carry both method and result/error")
        if not isinstance(message["method"], str):
            raise MalformedEnvelope("method must be a string")
        params = message.get("params")
        if params is not None and not isinstance(params, dict):
            raise MalformedEnvelope("params must be an object")
        if "id" not in message:
            return "notification"
        parse_request_id(message["id"])
        return "request"

    if has_result == has_error:
        raise MalformedEnvelope("A response must carry exactly one of result or error")
    if "params" in message:
        raise MalformedEnvelope("A response cannot carry params")
    if "id" not in message:
        raise MalformedEnvelope("A response must carry the id of its request")

    if has_error:
        # null only when the request id could not be determined
        if message["id"] is not None:
            parse_request_id(message["id"])
        return "error"

    parse_request_id(message["id"])
    return "response"


def encode(method: str, id: Any = None, params: Any = None) -> bytes:
    """
    Encode a request (or, without an id, a notification) as JSON bytes.

    ``params`` may be a model or a plain object; models are rendered with
    their wire names.
    """
    if isinstance(params, WireModel):
        params = params.to_wire()
    try:
        if id is None:
            message = RawNotification(method=method, params=params)
        else:
            message = RawRequest(id=id, method=method, params=params)
    except ValidationError as e:
        raise from_validation_error(e) from e
    return serialize(message)


def decode(data: str | bytes) -> RawRequest | RawNotification | RawResponse | JSONRPCError:
    """Decode JSON bytes into an envelope whose payload is left untyped."""
    message = _load_json(data)
    kind = classify_envelope(message)
    if kind == "request":
        return _validate(RawRequest, message)
    if kind == "notification":
        return _validate(RawNotification, message)
    if kind == "error":
        return _validate(JSONRPCError, message)
    return _validate(_raw_response, message)


def serialize(message: WireModel, indent: int | None = None) -> bytes:
    """Serialize a message (or any payload model) to UTF-8 JSON bytes.

    Without an explicit ``indent`` the configured ``json_indent`` is used.

    Raises:
        ValueError: If the message holds a NaN or infinite number.
    """
    if indent is None:
        indent = get_settings().json_indent
    data = json.dumps(message.to_wire(), ensure_ascii=False, allow_nan=False, indent=indent)
    return data.encode("utf-8")


def deserialize(data: str | bytes, sender: Sender = "client") -> Any:
    """
    Decode JSON bytes into the typed message ``sender`` may send.

    Returns:
        A request, notification, response or ``JSONRPCError`` model.

    Raises:
        MCPSchemaError: Exactly one error kind when the message does not parse.
    """
    if sender not in _responses:
        raise ValueError(f"Unknown sender: {sender!r}")

    message = _load_json(data)
    kind = classify_envelope(message)

    if kind == "request":
        return validate_message(f"{sender}_request", message)
    if kind == "notification":
        return validate_message(f"{sender}_notification", message)
    if kind == "error":
        return _validate(JSONRPCError, message)
    return _validate(_responses[sender], message)


class MessageCodec:
    """Encode and decode the messages exchanged with one peer."""

    def __init__(self, sender: Sender, settings: Settings | None = None):
        if sender not in _responses:
            raise ValueError(f"Unknown sender: {sender!r}")
        self.sender = sender
        self.settings = settings or get_settings()

    def deserialize(self, data: str | bytes) -> Any:
        """Decode a message sent by the peer, logging failures."""
        try:
            return deserialize(data, self.sender)
        except MCPSchemaError as e:
            fields: dict[str, Any] = {
                "sender": self.sender,
                "error_kind": e.kind,
                "error_code": e.code,
            }
            if self.settings.log_payloads:
                fields["payload"] = (
                    data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
                )
            logger.debug("message_decode_failed", reason=e.message, **fields)
            raise

    def serialize(self, message: WireModel) -> bytes:
        """Serialize an outgoing message."""
        return serialize(message, indent=self.settings.json_indent)

    def parse_message(self, raw_data: str | bytes) -> tuple[Any | None, dict[str, Any] | None]:
        """
        Parse a message from raw data.

        Returns (message, error) tuple. One will be None.
        """
        try:
            return self.deserialize(raw_data), None
        except MCPSchemaError as e:
            return None, e.to_error_data()

    def error_response(self, error: MCPSchemaError, id: Any = None) -> JSONRPCError:
        """Build the error response answering a message that failed to parse.

        Parse errors don't have a request id; leave ``id`` as None for them.
        """
        return JSONRPCError(id=id, error=ErrorData(**error.to_error_data()))
