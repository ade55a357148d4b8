"""Argument autocompletion (``completion/complete``)."""

from typing import Annotated, Literal, Union

from pydantic import Field

from mcp_schema.protocol.base import MCPModel, RequestParams, Result


class ResourceReference(MCPModel):
    """Reference to a resource or resource template."""

    type: Literal["ref/resource"] = "ref/resource"
    uri: str


class PromptReference(MCPModel):
    """Reference to a prompt or prompt template."""

    type: Literal["ref/prompt"] = "ref/prompt"
    name: str


Reference = Annotated[Union[ResourceReference, PromptReference], Field(discriminator="type")]


class CompleteArgument(MCPModel):
    """The argument being completed: its name and the partial value."""

    name: str
    value: str


class CompleteParams(RequestParams):
    ref: Reference
    argument: CompleteArgument


class CompletionData(MCPModel):
    values: list[str]
    total: int | None = None
    has_more: bool | None = None


class CompleteResult(Result):
    completion: CompletionData
