"""Configuration loading and management."""

from mcp_schema.config.loader import Settings, get_settings

__all__ = ["Settings", "get_settings"]
