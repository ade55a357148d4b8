"""Tests for settings and logging setup."""

import pytest
import structlog
from structlog.testing import capture_logs
from pydantic import ValidationError

from mcp_schema.codec import MessageCodec
from mcp_schema.config.loader import Settings, get_settings
from mcp_schema.errors import MalformedJson
from mcp_schema.utils.logging import get_logger, setup_logging


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self):
        """Test the default settings."""
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.log_payloads is False
        assert settings.json_indent is None

    def test_environment_overrides(self, monkeypatch):
        """Test that MCP_SCHEMA_ variables are read."""
        monkeypatch.setenv("MCP_SCHEMA_LOG_LEVEL", "debug")
        monkeypatch.setenv("MCP_SCHEMA_JSON_INDENT", "4")
        monkeypatch.setenv("MCP_SCHEMA_LOG_PAYLOADS", "true")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.json_indent == 4
        assert settings.log_payloads is True

    def test_rejects_unknown_log_level(self):
        """Test that a misspelt log level fails early."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_get_settings_is_cached(self):
        """Test that get_settings returns one shared instance."""
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for structured logging setup."""

    def test_setup_logging_json(self):
        """Test that setup configures structlog with the JSON renderer."""
        setup_logging(Settings(_env_file=None, log_level="WARNING"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_setup_logging_console(self):
        """Test that the console format uses the dev renderer."""
        setup_logging(Settings(_env_file=None, log_format="console"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_decode_failure_is_logged(self):
        """Test that the codec logs the failing error kind."""
        codec = MessageCodec("client", Settings(_env_file=None, log_payloads=True))

        with capture_logs() as logs:
            with pytest.raises(MalformedJson):
                codec.deserialize(b"{broken")

        assert logs[0]["event"] == "message_decode_failed"
        assert logs[0]["error_kind"] == "MalformedJson"
        assert logs[0]["payload"] == "{broken"

    def test_payload_not_logged_by_default(self, client_codec):
        """Test that raw message text stays out of logs unless enabled."""
        with capture_logs() as logs:
            client_codec.parse_message("[]")

        assert logs[0]["error_kind"] == "MalformedEnvelope"
        assert "payload" not in logs[0]

    def test_get_logger(self):
        """Test that get_logger returns a usable structured logger."""
        logger = get_logger("mcp_schema.test")
        assert hasattr(logger, "info")
