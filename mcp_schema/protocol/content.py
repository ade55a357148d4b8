"""Message content and resource contents.

The content unions carry no wrapper tag of their own: the variant is picked
by probing the raw object in a fixed order (the ``type`` value, or for
resource contents the presence of ``text`` / ``blob``). The first shape that
matches decides the variant; nothing else is tried.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Tag, TypeAdapter, ValidationError

from mcp_schema.errors import from_validation_error
from mcp_schema.protocol.base import WIRE_CONTEXT, Annotations, MCPModel


# =============================================================================
# Resource Contents
# =============================================================================


class TextResourceContents(MCPModel):
    """Textual resource contents."""

    uri: str
    mime_type: str | None = None
    text: str


class BlobResourceContents(MCPModel):
    """Binary resource contents, base64 encoded."""

    uri: str
    mime_type: str | None = None
    blob: str


def _resource_contents_kind(value: Any) -> str | None:
    if isinstance(value, TextResourceContents):
        return "text"
    if isinstance(value, BlobResourceContents):
        return "blob"
    if isinstance(value, dict):
        if "text" in value:
            return "text"
        if "blob" in value:
            return "blob"
    return None


ResourceContents = Annotated[
    Union[
        Annotated[TextResourceContents, Tag("text")],
        Annotated[BlobResourceContents, Tag("blob")],
    ],
    Discriminator(
        _resource_contents_kind,
        custom_error_type="unknown_content_variant",
        custom_error_message="Resource contents must carry either 'text' or 'blob'",
    ),
]


# =============================================================================
# Message Content
# =============================================================================


class TextContent(MCPModel):
    """Text content in a prompt, tool result or sampling message."""

    type: Literal["text"] = "text"
    text: str
    annotations: Annotations | None = None


class ImageContent(MCPModel):
    """Image content (base64 encoded)."""

    type: Literal["image"] = "image"
    data: str
    mime_type: str
    annotations: Annotations | None = None


class EmbeddedResource(MCPModel):
    """The contents of a resource, embedded into a prompt or tool call result."""

    type: Literal["resource"] = "resource"
    resource: ResourceContents
    annotations: Annotations | None = None


def _content_type(value: Any) -> str | None:
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    return kind if isinstance(kind, str) else None


PromptContent = Annotated[
    Union[
        Annotated[TextContent, Tag("text")],
        Annotated[ImageContent, Tag("image")],
        Annotated[EmbeddedResource, Tag("resource")],
    ],
    Discriminator(
        _content_type,
        custom_error_type="unknown_content_variant",
        custom_error_message="Content type must be 'text', 'image' or 'resource'",
    ),
]

SamplingContent = Annotated[
    Union[
        Annotated[TextContent, Tag("text")],
        Annotated[ImageContent, Tag("image")],
    ],
    Discriminator(
        _content_type,
        custom_error_type="unknown_content_variant",
        custom_error_message="Sampling content type must be 'text' or 'image'",
    ),
]


# =============================================================================
# Resolution
# =============================================================================

_prompt_content = TypeAdapter(PromptContent)
_sampling_content = TypeAdapter(SamplingContent)
_resource_contents = TypeAdapter(ResourceContents)


def _resolve(adapter: TypeAdapter, data: Any) -> Any:
    try:
        return adapter.validate_python(data, context=WIRE_CONTEXT)
    except ValidationError as e:
        raise from_validation_error(e) from e


def resolve_prompt_content(data: Any) -> TextContent | ImageContent | EmbeddedResource:
    """Resolve a raw content object by its ``type``: text, image, then resource."""
    return _resolve(_prompt_content, data)


def resolve_sampling_content(data: Any) -> TextContent | ImageContent:
    """Resolve a raw sampling content object by its ``type``: text, then image."""
    return _resolve(_sampling_content, data)


def resolve_resource_contents(data: Any) -> TextResourceContents | BlobResourceContents:
    """Resolve raw resource contents: a ``text`` key wins over a ``blob`` key."""
    return _resolve(_resource_contents, data)
