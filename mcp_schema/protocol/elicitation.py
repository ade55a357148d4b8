"""Elicitation: asking the user for structured input."""

from typing import Any, Literal

from mcp_schema.protocol.base import RequestParams, Result

ElicitationAction = Literal["accept", "reject", "cancel"]


class ElicitationCreateParams(RequestParams):
    """Parameters for ``elicitation/create``.

    ``requested_schema`` is a JSON Schema for the expected answer. It is
    carried as-is and never validated here.
    """

    message: str
    requested_schema: dict[str, Any]


class ElicitationCreateResult(Result):
    """The user's answer; ``content`` is present when the action is ``accept``."""

    action: ElicitationAction
    content: Any | None = None
