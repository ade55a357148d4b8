"""Typed Model Context Protocol messages over JSON-RPC 2.0."""

from mcp_schema.codec import MessageCodec, decode, deserialize, encode, serialize
from mcp_schema.errors import (
    FieldCollision,
    InvalidIdentifierShape,
    MalformedEnvelope,
    MalformedJson,
    MCPSchemaError,
    NoMatchingResultShape,
    ParamsShapeMismatch,
    UnknownContentVariant,
    UnsupportedMethod,
)
from mcp_schema.protocol import LATEST_PROTOCOL_VERSION, dispatch, resolve_client_result, resolve_result

__version__ = "1.0.0"

__all__ = [
    "LATEST_PROTOCOL_VERSION",
    "MessageCodec",
    "decode",
    "deserialize",
    "dispatch",
    "encode",
    "resolve_client_result",
    "resolve_result",
    "serialize",
    "FieldCollision",
    "InvalidIdentifierShape",
    "MalformedEnvelope",
    "MalformedJson",
    "MCPSchemaError",
    "NoMatchingResultShape",
    "ParamsShapeMismatch",
    "UnknownContentVariant",
    "UnsupportedMethod",
]
