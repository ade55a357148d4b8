"""Pytest configuration and fixtures."""

import json

import pytest
import structlog

from mcp_schema.codec import MessageCodec
from mcp_schema.config.loader import Settings, get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Give every test fresh settings, unaffected by the developer's environment."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_PAYLOADS", "JSON_INDENT"):
        monkeypatch.delenv(f"MCP_SCHEMA_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def client_codec():
    """Codec for messages sent by a client."""
    return MessageCodec("client", Settings(_env_file=None))


@pytest.fixture
def server_codec():
    """Codec for messages sent by a server."""
    return MessageCodec("server", Settings(_env_file=None))


@pytest.fixture
def sample_jsonrpc_request():
    """Sample JSON-RPC request factory."""
    def _make_request(method: str, params: dict | None = None, id: int | str = 1):
        message = {"jsonrpc": "2.0", "id": id, "method": method}
        if params is not None:
            message["params"] = params
        return message
    return _make_request


@pytest.fixture
def sample_jsonrpc_notification():
    """Sample JSON-RPC notification factory."""
    def _make_notification(method: str, params: dict | None = None):
        message = {"jsonrpc": "2.0", "method": method}
        if params is not None:
            message["params"] = params
        return message
    return _make_notification


@pytest.fixture
def sample_jsonrpc_response():
    """Sample JSON-RPC response factory."""
    def _make_response(result, id: int | str = 1):
        return {"jsonrpc": "2.0", "id": id, "result": result}
    return _make_response


@pytest.fixture
def as_bytes():
    """Render a JSON object as wire bytes."""
    def _dump(message) -> bytes:
        return json.dumps(message).encode("utf-8")
    return _dump


@pytest.fixture
def initialize_params():
    """Params of a minimal ``initialize`` request."""
    return {
        "protocolVersion": "2024-11-05",
        "capabilities": {},
        "clientInfo": {"name": "test-client", "version": "1.0"},
    }
