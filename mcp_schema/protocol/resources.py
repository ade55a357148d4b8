"""Resources: listing, templates, reading and subscriptions."""

from mcp_schema.protocol.base import (
    Annotations,
    MCPModel,
    NotificationParams,
    PaginatedResult,
    RequestParams,
    Result,
)
from mcp_schema.protocol.content import ResourceContents


class Resource(MCPModel):
    """A known resource the server is capable of reading."""

    uri: str
    name: str
    description: str | None = None
    mime_type: str | None = None
    annotations: Annotations | None = None


class ResourceTemplate(MCPModel):
    """A template description for resources available on the server."""

    uri_template: str
    name: str
    description: str | None = None
    mime_type: str | None = None
    annotations: Annotations | None = None


class ListResourcesResult(PaginatedResult):
    resources: list[Resource]


class ListResourceTemplatesResult(PaginatedResult):
    resource_templates: list[ResourceTemplate]


class ReadResourceParams(RequestParams):
    uri: str


class ReadResourceResult(Result):
    contents: list[ResourceContents]


class SubscribeParams(RequestParams):
    uri: str


class UnsubscribeParams(RequestParams):
    uri: str


class ResourceUpdatedParams(NotificationParams):
    """Parameters of ``notifications/resources/updated``."""

    uri: str
