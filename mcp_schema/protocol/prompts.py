"""Prompts and prompt templates."""

from mcp_schema.protocol.base import MCPModel, PaginatedResult, RequestParams, Result, Role
from mcp_schema.protocol.content import PromptContent


class PromptArgument(MCPModel):
    """An argument a prompt template accepts."""

    name: str
    description: str | None = None
    required: bool | None = None


class Prompt(MCPModel):
    """A prompt or prompt template the server offers."""

    name: str
    description: str | None = None
    arguments: list[PromptArgument] | None = None


class ListPromptsResult(PaginatedResult):
    prompts: list[Prompt]


class GetPromptParams(RequestParams):
    """Parameters for ``prompts/get``."""

    name: str
    arguments: dict[str, str] | None = None


class PromptMessage(MCPModel):
    """One message of a prompt: text, an image or an embedded resource."""

    role: Role
    content: PromptContent


class GetPromptResult(Result):
    description: str | None = None
    messages: list[PromptMessage]
