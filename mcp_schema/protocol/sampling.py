"""Sampling: the server asks the client to run an LLM completion."""

from typing import Any, Literal

from mcp_schema.protocol.base import MCPModel, RequestParams, Result, Role
from mcp_schema.protocol.content import SamplingContent

IncludeContext = Literal["none", "thisServer", "allServers"]


class SamplingMessage(MCPModel):
    role: Role
    content: SamplingContent


class ModelHint(MCPModel):
    """A hint for model selection, matched as a substring of model names."""

    name: str | None = None


class ModelPreferences(MCPModel):
    """Priorities (0 to 1) the client should weigh when picking a model."""

    hints: list[ModelHint] | None = None
    cost_priority: float | None = None
    speed_priority: float | None = None
    intelligence_priority: float | None = None


class CreateMessageParams(RequestParams):
    """Parameters for ``sampling/createMessage``."""

    messages: list[SamplingMessage]
    model_preferences: ModelPreferences | None = None
    system_prompt: str | None = None
    include_context: IncludeContext | None = None
    temperature: float | None = None
    max_tokens: int
    stop_sequences: list[str] | None = None
    metadata: dict[str, Any] | None = None


class CreateMessageResult(Result):
    """The client's answer to ``sampling/createMessage``."""

    role: Role
    content: SamplingContent
    model: str
    stop_reason: str | None = None
