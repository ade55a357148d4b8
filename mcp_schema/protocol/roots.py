"""Roots: the filesystem locations a client exposes to a server."""

from mcp_schema.protocol.base import MCPModel, RequestParams, Result


class Root(MCPModel):
    """A root directory or file, typically a ``file://`` URI."""

    uri: str
    name: str | None = None


class ListRootsParams(RequestParams):
    """Parameters for ``roots/list``. Usually empty."""


class ListRootsResult(Result):
    roots: list[Root]
