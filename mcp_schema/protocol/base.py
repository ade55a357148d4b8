"""Base types shared by every MCP message.

Every payload is an *extensible record*: a pydantic model with a fixed set of
declared fields plus an ordered map of unrecognised keys (``model_extra``)
that survives a parse/serialize round trip untouched. Declared fields use
snake_case internally and camelCase on the wire.
"""

from typing import Annotated, Any, Final, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainValidator,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    ValidationInfo,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from mcp_schema.errors import InvalidIdentifierShape

JSONRPC_VERSION: Final[str] = "2.0"
LATEST_PROTOCOL_VERSION: Final[str] = "2024-11-05"

# Validation context for data read off the wire
WIRE_CONTEXT: Final[dict[str, bool]] = {"wire": True}


# =============================================================================
# Identifier Types
# =============================================================================

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _json_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _check_identifier(value: Any) -> str | int:
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise PydanticCustomError(
            "invalid_identifier",
            "Identifier must be a string or an integer, got {kind}",
            {"kind": _json_kind(value)},
        )
    if isinstance(value, int) and not _INT64_MIN <= value <= _INT64_MAX:
        raise PydanticCustomError(
            "invalid_identifier",
            "Identifier {value} does not fit in a signed 64-bit integer",
            {"value": value},
        )
    return value


RequestId = Annotated[Union[str, int], PlainValidator(_check_identifier)]
"""Correlates a request with its response; a JSON string or integer."""

ProgressToken = Annotated[Union[str, int], PlainValidator(_check_identifier)]
"""Associates progress notifications with an outstanding request."""

Cursor = str
"""Opaque pagination position."""


def parse_request_id(value: Any) -> str | int:
    """Parse a raw JSON scalar as a request id."""
    try:
        return _check_identifier(value)
    except PydanticCustomError as e:
        raise InvalidIdentifierShape(f"Invalid request id: {e.message()}") from e


def parse_progress_token(value: Any) -> str | int:
    """Parse a raw JSON scalar as a progress token."""
    try:
        return _check_identifier(value)
    except PydanticCustomError as e:
        raise InvalidIdentifierShape(f"Invalid progress token: {e.message()}") from e


# =============================================================================
# Record Base Models
# =============================================================================


class WireModel(BaseModel):
    """Immutable model rendered with camelCase keys.

    Optional fields holding ``None`` are left out of the rendered object
    entirely; required fields are always emitted, even when ``None``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        # fields such as model_preferences are part of the protocol
        protected_namespaces=(),
        # NaN and infinities have no JSON form
        allow_inf_nan=False,
        ser_json_inf_nan="constants",
    )

    @model_validator(mode="before")
    @classmethod
    def _reject_shadowed_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data
        from_wire = bool(info.context and info.context.get("wire"))
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            if alias == name or name not in data:
                continue
            # Internal names are not wire names; on the wire they would
            # silently populate the field instead of landing in the extras.
            if from_wire or alias in data:
                raise PydanticCustomError(
                    "field_collision",
                    "Key '{key}' collides with declared field '{alias}'",
                    {"key": name, "alias": alias},
                )
        return data

    @model_serializer(mode="wrap")
    def _omit_absent_fields(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field in type(self).model_fields.items():
            if field.is_required() or getattr(self, name) is not None:
                continue
            key = (field.serialization_alias or field.alias or name) if info.by_alias else name
            data.pop(key, None)
        return data

    def to_wire(self) -> dict[str, Any]:
        """Render as a JSON-compatible dict using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_wire(cls, data: Any) -> "WireModel":
        """Parse a JSON-decoded object using wire naming rules."""
        return cls.model_validate(data, context=WIRE_CONTEXT)


class MCPModel(WireModel):
    """Extensible record: declared fields plus unrecognised sibling keys.

    Unknown keys are kept verbatim (no renaming) in ``model_extra`` and are
    rendered after the declared fields, in their original order.
    """

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="after")
    def _check_extra_keys(self) -> "MCPModel":
        if not self.model_extra:
            return self
        for name, field in type(self).model_fields.items():
            for key in (name, field.alias or name):
                if key in self.model_extra:
                    raise PydanticCustomError(
                        "field_collision",
                        "Extra key '{key}' shadows declared field '{name}'",
                        {"key": key, "name": name},
                    )
        return self


# =============================================================================
# Request / Notification / Result Bases
# =============================================================================


class RequestMeta(MCPModel):
    """The ``_meta`` object of request params."""

    progress_token: ProgressToken | None = None


class RequestParams(MCPModel):
    """Base class for request parameters."""

    meta: RequestMeta | None = Field(default=None, alias="_meta")


class NotificationParams(MCPModel):
    """Base class for notification parameters."""

    meta: dict[str, Any] | None = Field(default=None, alias="_meta")


class Result(MCPModel):
    """Base class for results."""

    meta: dict[str, Any] | None = Field(default=None, alias="_meta")


class EmptyResult(Result):
    """Indicates success but carries no data."""


class PaginatedParams(RequestParams):
    """Parameters of list requests that may be paginated."""

    cursor: Cursor | None = None


class PaginatedResult(Result):
    next_cursor: Cursor | None = None


def match_first_shape(
    shapes: tuple[type[Result], ...], value: Any, context: dict[str, Any] | None = None
) -> Result | None:
    """Return ``value`` parsed as the first of ``shapes`` it satisfies.

    Shapes are tried strictly in the given order, so a shape with no
    required fields (``EmptyResult``) must come last.
    """
    if isinstance(value, shapes):
        return value
    for shape in shapes:
        try:
            return shape.model_validate(value, context=context)
        except ValidationError:
            continue
    return None


# =============================================================================
# Common Types
# =============================================================================

Role = Literal["user", "assistant"]


class Annotations(MCPModel):
    """Optional hints about who a piece of content is for and how important it is."""

    audience: list[Role] | None = None
    priority: float | None = None
