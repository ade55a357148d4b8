"""Server-side logging control and log message notifications."""

from typing import Any, Literal

from mcp_schema.protocol.base import NotificationParams, RequestParams

# Syslog severities (RFC 5424), lowest first
LoggingLevel = Literal[
    "debug",
    "info",
    "notice",
    "warning",
    "error",
    "critical",
    "alert",
    "emergency",
]


class SetLevelParams(RequestParams):
    """Parameters for ``logging/setLevel``."""

    level: LoggingLevel


class LoggingMessageParams(NotificationParams):
    """Parameters of ``notifications/message``."""

    level: LoggingLevel
    logger: str | None = None
    data: Any
