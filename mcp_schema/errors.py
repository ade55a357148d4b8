"""JSON-RPC 2.0 error codes and the message decoding error taxonomy."""

from typing import Any

from pydantic import ValidationError

# Standard JSON-RPC 2.0 error codes
PARSE_ERROR = -32700  # Invalid JSON was received
INVALID_REQUEST = -32600  # The JSON sent is not a valid Request object
METHOD_NOT_FOUND = -32601  # The method does not exist / is not available
INVALID_PARAMS = -32602  # Invalid method parameter(s)
INTERNAL_ERROR = -32603  # Internal JSON-RPC error


def error_message(code: int) -> str:
    """Get the standard message for a JSON-RPC error code."""
    messages = {
        PARSE_ERROR: "Parse error",
        INVALID_REQUEST: "Invalid Request",
        METHOD_NOT_FOUND: "Method not found",
        INVALID_PARAMS: "Invalid params",
        INTERNAL_ERROR: "Internal error",
    }
    return messages.get(code, "Unknown error")


def make_error_data(code: int, message: str | None = None, data: Any = None) -> dict[str, Any]:
    """Create an error object for JSON-RPC response."""
    error: dict[str, Any] = {
        "code": code,
        "message": message or error_message(code),
    }
    if data is not None:
        error["data"] = data
    return error


# =============================================================================
# Error taxonomy
# =============================================================================


class MCPSchemaError(Exception):
    """A message failed to parse or did not have the expected shape.

    Every subclass maps to the JSON-RPC error code a peer should answer with.
    """

    code: int = INTERNAL_ERROR

    def __init__(self, message: str | None = None, data: Any = None):
        self.message = message or error_message(self.code)
        self.data = data
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        """Name of the error kind, e.g. ``UnsupportedMethod``."""
        return type(self).__name__

    def to_error_data(self) -> dict[str, Any]:
        """Render as the ``error`` member of a JSON-RPC error response."""
        return make_error_data(self.code, self.message, self.data)


class MalformedJson(MCPSchemaError):
    """The payload is not valid UTF-8 JSON."""

    code = PARSE_ERROR


class MalformedEnvelope(MCPSchemaError):
    """The JSON-RPC envelope is broken (version, id, result/error members)."""

    code = INVALID_REQUEST


class InvalidIdentifierShape(MCPSchemaError):
    """A request id or progress token is neither a string nor an integer."""

    code = INVALID_REQUEST


class UnsupportedMethod(MCPSchemaError):
    code = METHOD_NOT_FOUND


class ParamsShapeMismatch(MCPSchemaError):
    code = INVALID_PARAMS


class UnknownContentVariant(MCPSchemaError):
    code = INVALID_PARAMS


class FieldCollision(MCPSchemaError):
    """A raw key shadows a declared field under its internal name."""

    code = INVALID_PARAMS


class NoMatchingResultShape(MCPSchemaError):
    code = INTERNAL_ERROR


# pydantic error types raised by our validators, most specific first
_ERROR_TYPES: tuple[tuple[str, type[MCPSchemaError]], ...] = (
    ("field_collision", FieldCollision),
    ("invalid_identifier", InvalidIdentifierShape),
    ("unsupported_method", UnsupportedMethod),
    ("unknown_content_variant", UnknownContentVariant),
    ("no_matching_result_shape", NoMatchingResultShape),
)


def _describe(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]


def from_validation_error(exc: ValidationError) -> MCPSchemaError:
    """Classify a pydantic validation failure as exactly one error kind.

    Failures not raised by one of our own validators mean the payload did not
    satisfy its target type's fields, so they become ``ParamsShapeMismatch``.
    """
    errors = exc.errors(include_url=False)
    for error_type, error_cls in _ERROR_TYPES:
        for error in errors:
            if error["type"] == error_type:
                return error_cls(_describe(error))
    if not errors:
        return ParamsShapeMismatch(str(exc))
    return ParamsShapeMismatch(_describe(errors[0]))
